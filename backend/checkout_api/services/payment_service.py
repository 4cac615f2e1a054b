"""Payment service - validates the amount and delegates to the selected provider."""

import logging
import math

from shared.correlation import get_correlation_id
from shared.models import ChargeState, PaymentOutcome
from provider_sim.factories import PaymentFactory
from checkout_api.services.state_machine import ChargeAttempt

logger = logging.getLogger("checkoutrail.payments")

INVALID_AMOUNT_MESSAGE = "Payment amount must be greater than zero"


class InvalidAmountError(Exception):
    def __init__(self, amount):
        self.amount = amount
        super().__init__(INVALID_AMOUNT_MESSAGE)


class PaymentService:
    """Stateless; a single instance can serve every concurrent checkout."""

    async def process_payment(self, factory: PaymentFactory, amount: float) -> PaymentOutcome:
        attempt = ChargeAttempt(amount)

        if not (amount > 0 and math.isfinite(amount)):
            attempt.advance(ChargeState.REJECTED)
            logger.warning(f"[{get_correlation_id()}] Rejected charge of {amount}")
            raise InvalidAmountError(amount)

        attempt.advance(ChargeState.DELEGATING)
        provider = factory.create_payment_provider()

        logger.info(
            f"[{get_correlation_id()}] Processing ${amount:.2f} with {provider.get_name()}..."
        )
        attempt.advance(ChargeState.AWAITING_PROVIDER)
        result = await provider.process_payment(amount)
        attempt.advance(ChargeState.COMPLETED)

        logger.info(
            f"[{get_correlation_id()}] "
            f"{'Approved' if result.success else 'Declined'}: {result.message}"
        )
        return result
