"""Simulated payment providers and the factories that create them."""

from provider_sim.factories import (
    PaymentFactory,
    ApplePayFactory,
    PayPalFactory,
    CreditCardFactory,
)
from provider_sim.providers import (
    PaymentProvider,
    ApplePayProvider,
    PayPalProvider,
    CreditCardProvider,
)
from provider_sim.profiles import PROVIDER_PROFILES

__all__ = [
    "PaymentFactory",
    "ApplePayFactory",
    "PayPalFactory",
    "CreditCardFactory",
    "PaymentProvider",
    "ApplePayProvider",
    "PayPalProvider",
    "CreditCardProvider",
    "PROVIDER_PROFILES",
]
