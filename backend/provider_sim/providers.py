"""Simulated payment providers.

Each provider waits out a fixed latency, draws one random sample against its
success rate and resolves with a ``PaymentOutcome``. A decline is a normal
outcome (``success=False``); ``process_payment`` never raises for it.
"""

import logging
from abc import ABC, abstractmethod

from shared.models import PaymentOutcome, ProviderProfile
from provider_sim.profiles import APPLE_PAY_PROFILE, PAYPAL_PROFILE, CREDIT_CARD_PROFILE
from provider_sim.utils import resolve_rng, simulate_delay, generate_transaction_id

logger = logging.getLogger("checkoutrail.providers")


class PaymentProvider(ABC):
    """Capability contract for a payment backend."""

    @abstractmethod
    def get_name(self) -> str:
        """Provider display name."""

    @abstractmethod
    async def process_payment(self, amount: float) -> PaymentOutcome:
        """Attempt a charge of ``amount`` and report the outcome."""

    @property
    def name(self) -> str:
        return self.get_name()


class SimulatedProvider(PaymentProvider):
    """Provider driven entirely by its ``PROFILE`` constants."""

    PROFILE: ProviderProfile

    def __init__(self, rng=None, delay=simulate_delay):
        self._rng = resolve_rng(rng)
        self._delay = delay

    @property
    def profile(self) -> ProviderProfile:
        return self.PROFILE

    def get_name(self) -> str:
        return self.PROFILE.name

    async def process_payment(self, amount: float) -> PaymentOutcome:
        profile = self.profile
        await self._delay(profile.latency_ms)

        success = self._rng.random() < profile.success_rate
        transaction_id = generate_transaction_id(profile.transaction_prefix, self._rng)
        logger.debug(
            f"{profile.name} {'approved' if success else 'declined'} "
            f"{amount:.2f} as {transaction_id}"
        )

        return PaymentOutcome(
            success=success,
            transaction_id=transaction_id,
            message=profile.success_message if success else profile.failure_message,
            provider=profile.name,
        )


class ApplePayProvider(SimulatedProvider):
    """Fast provider: 800ms, 95% success."""

    PROFILE = APPLE_PAY_PROFILE


class PayPalProvider(SimulatedProvider):
    """Medium provider: 1500ms, 90% success."""

    PROFILE = PAYPAL_PROFILE


class CreditCardProvider(SimulatedProvider):
    """Slow provider (bank validation): 2000ms, 85% success."""

    PROFILE = CREDIT_CARD_PROFILE
