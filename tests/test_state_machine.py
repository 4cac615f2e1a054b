"""Tests for the charge-attempt state machine."""

import pytest

from shared.models import ChargeState
from checkout_api.services.state_machine import (
    ChargeAttempt,
    InvalidTransitionError,
    validate_charge_transition,
)


class TestChargeTransitions:

    def test_happy_path(self):
        attempt = ChargeAttempt(10.0)
        attempt.advance(ChargeState.DELEGATING)
        attempt.advance(ChargeState.AWAITING_PROVIDER)
        attempt.advance(ChargeState.COMPLETED)

        assert attempt.state == ChargeState.COMPLETED
        assert attempt.is_terminal
        assert attempt.history == [
            ChargeState.VALIDATING,
            ChargeState.DELEGATING,
            ChargeState.AWAITING_PROVIDER,
            ChargeState.COMPLETED,
        ]

    def test_rejection_is_terminal(self):
        attempt = ChargeAttempt(0)
        attempt.advance(ChargeState.REJECTED)

        assert attempt.is_terminal
        with pytest.raises(InvalidTransitionError):
            attempt.advance(ChargeState.DELEGATING)

    def test_cannot_skip_delegation(self):
        with pytest.raises(InvalidTransitionError) as exc:
            validate_charge_transition("validating", "completed")
        assert exc.value.current == "validating"
        assert exc.value.target == "completed"

    def test_no_rejection_after_delegating(self):
        with pytest.raises(InvalidTransitionError):
            validate_charge_transition("delegating", "rejected")

    def test_valid_transition(self):
        assert validate_charge_transition("awaiting_provider", "completed") is True
