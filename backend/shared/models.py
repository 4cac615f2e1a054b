"""Domain models, charge state machine, and enums shared across the checkout."""

from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


# === Enums ===

class ChargeState(str, Enum):
    VALIDATING = "validating"
    DELEGATING = "delegating"
    AWAITING_PROVIDER = "awaiting_provider"
    COMPLETED = "completed"
    REJECTED = "rejected"


# === State Machine Transitions ===

CHARGE_TRANSITIONS: dict[ChargeState, list[ChargeState]] = {
    ChargeState.VALIDATING: [ChargeState.DELEGATING, ChargeState.REJECTED],
    ChargeState.DELEGATING: [ChargeState.AWAITING_PROVIDER],
    ChargeState.AWAITING_PROVIDER: [ChargeState.COMPLETED],
    ChargeState.COMPLETED: [],
    ChargeState.REJECTED: [],
}


# === Domain Models ===

class ProviderProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    provider_id: str
    name: str
    latency_ms: int = Field(ge=0)
    success_rate: float = Field(ge=0.0, le=1.0)
    success_message: str
    failure_message: str
    transaction_prefix: str = Field(pattern=r"^[A-Z]{2}$")


class PaymentOutcome(BaseModel):
    """Result of a single charge attempt. A decline is ``success=False``."""

    model_config = ConfigDict(frozen=True)

    success: bool
    transaction_id: str
    message: str
    provider: str


class Product(BaseModel):
    id: int
    name: str
    price: float = Field(allow_inf_nan=False)
    image: str = ""


class PaymentResultRecord(BaseModel):
    """Flat record handed to the result page; ``amount`` is added by the caller."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    transaction_id: str = Field(alias="transactionId")
    message: str
    provider: str
    amount: float

    @classmethod
    def from_outcome(cls, outcome: PaymentOutcome, amount: float) -> "PaymentResultRecord":
        return cls(
            success=outcome.success,
            transaction_id=outcome.transaction_id,
            message=outcome.message,
            provider=outcome.provider,
            amount=amount,
        )

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)
