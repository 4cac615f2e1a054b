"""State machine validation for a single charge attempt."""

import logging

from shared.models import ChargeState, CHARGE_TRANSITIONS

logger = logging.getLogger("checkoutrail.charge")


class InvalidTransitionError(Exception):
    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Invalid charge transition: {current} -> {target}")


def validate_charge_transition(current: str, target: str) -> bool:
    current_state = ChargeState(current)
    target_state = ChargeState(target)
    allowed = CHARGE_TRANSITIONS.get(current_state, [])
    if target_state not in allowed:
        raise InvalidTransitionError(current, target)
    return True


class ChargeAttempt:
    """Tracks where one charge attempt is: validating, delegating, awaiting or done."""

    def __init__(self, amount: float):
        self.amount = amount
        self.state = ChargeState.VALIDATING
        self.history = [ChargeState.VALIDATING]

    def advance(self, target: ChargeState) -> None:
        validate_charge_transition(self.state.value, target.value)
        logger.debug(f"Charge {self.amount}: {self.state.value} -> {target.value}")
        self.state = target
        self.history.append(target)

    @property
    def is_terminal(self) -> bool:
        return not CHARGE_TRANSITIONS[self.state]
