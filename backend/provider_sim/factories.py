"""Payment factories: one creator per provider variant.

A factory returns a brand-new provider on every call and keeps nothing from
previous calls except the random source and delay primitive it was given.
"""

from abc import ABC, abstractmethod

from provider_sim.providers import (
    PaymentProvider,
    ApplePayProvider,
    PayPalProvider,
    CreditCardProvider,
)
from provider_sim.utils import simulate_delay


class PaymentFactory(ABC):

    def __init__(self, rng=None, delay=simulate_delay):
        self._rng = rng
        self._delay = delay

    @abstractmethod
    def create_payment_provider(self) -> PaymentProvider:
        """Create a fresh provider instance."""


class ApplePayFactory(PaymentFactory):

    def create_payment_provider(self) -> PaymentProvider:
        return ApplePayProvider(rng=self._rng, delay=self._delay)


class PayPalFactory(PaymentFactory):

    def create_payment_provider(self) -> PaymentProvider:
        return PayPalProvider(rng=self._rng, delay=self._delay)


class CreditCardFactory(PaymentFactory):

    def create_payment_provider(self) -> PaymentProvider:
        return CreditCardProvider(rng=self._rng, delay=self._delay)
