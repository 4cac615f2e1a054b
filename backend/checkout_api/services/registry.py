"""Selection registry - maps payment-method labels to provider factories."""

import logging
import os
import random
from typing import Optional

from provider_sim.factories import (
    PaymentFactory,
    ApplePayFactory,
    PayPalFactory,
    CreditCardFactory,
)
from provider_sim.profiles import PROVIDER_PROFILES
from provider_sim.utils import simulate_delay

logger = logging.getLogger("checkoutrail.registry")


class UnknownProviderError(Exception):
    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Invalid payment method: {label}")


class ProviderRegistry:

    def __init__(self, factories: Optional[dict[str, PaymentFactory]] = None):
        self._factories: dict[str, PaymentFactory] = dict(factories or {})

    def register(self, label: str, factory: PaymentFactory) -> None:
        if label in self._factories:
            logger.warning(f"Replacing factory registered for {label}")
        self._factories[label] = factory

    def get(self, label: str) -> Optional[PaymentFactory]:
        return self._factories.get(label)

    def resolve(self, label: str) -> PaymentFactory:
        factory = self.get(label)
        if factory is None:
            raise UnknownProviderError(label)
        return factory

    def labels(self) -> list[str]:
        return list(self._factories)

    def __contains__(self, label: str) -> bool:
        return label in self._factories

    def __len__(self) -> int:
        return len(self._factories)


# Checkout order of the payment methods
DEFAULT_PROVIDER_FACTORIES = {
    "paypal": PayPalFactory,
    "apple_pay": ApplePayFactory,
    "credit_card": CreditCardFactory,
}


def build_default_registry(rng=None, delay=simulate_delay) -> ProviderRegistry:
    """Wire the three payment methods offered at checkout, labelled by display name.

    When ``rng`` is not given and ``SEED`` is set, every factory shares one
    ``random.Random(SEED)`` so outcomes are reproducible.
    """
    if rng is None and os.environ.get("SEED"):
        rng = random.Random(int(os.environ["SEED"]))

    registry = ProviderRegistry()
    for provider_id, factory_cls in DEFAULT_PROVIDER_FACTORIES.items():
        label = PROVIDER_PROFILES[provider_id].name
        registry.register(label, factory_cls(rng=rng, delay=delay))
    return registry
