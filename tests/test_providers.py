"""Tests for the simulated payment providers."""

import asyncio
import re
import time

import pytest
from pydantic import ValidationError

from shared.models import PaymentOutcome
from provider_sim.providers import (
    PaymentProvider,
    ApplePayProvider,
    PayPalProvider,
    CreditCardProvider,
)

VARIANTS = [
    (ApplePayProvider, "Apple Pay", "AP", 800, 0.95),
    (PayPalProvider, "PayPal", "PP", 1500, 0.90),
    (CreditCardProvider, "Credit Card", "CC", 2000, 0.85),
]


class TestProviderContract:

    def test_cannot_instantiate_abstract_provider(self):
        with pytest.raises(TypeError):
            PaymentProvider()

    @pytest.mark.parametrize("cls,name,prefix,latency,rate", VARIANTS)
    def test_name(self, cls, name, prefix, latency, rate):
        provider = cls()
        assert provider.get_name() == name
        assert provider.name == name
        assert provider.profile is cls.PROFILE
        assert provider.profile.transaction_prefix == prefix

    @pytest.mark.parametrize("cls,name,prefix,latency,rate", VARIANTS)
    @pytest.mark.asyncio
    async def test_outcome_shape(self, cls, name, prefix, latency, rate, seeded_rng, no_delay):
        result = await cls(rng=seeded_rng, delay=no_delay).process_payment(100)

        assert isinstance(result, PaymentOutcome)
        assert result.provider == name
        assert re.fullmatch(rf"{prefix}-\d+-[a-z0-9]{{9}}", result.transaction_id)
        assert no_delay.calls == [latency]

    @pytest.mark.parametrize("cls,name,prefix,latency,rate", VARIANTS)
    @pytest.mark.asyncio
    async def test_success_message(self, cls, name, prefix, latency, rate, always_approve, no_delay):
        result = await cls(rng=always_approve, delay=no_delay).process_payment(50)

        assert result.success is True
        assert result.message == cls.PROFILE.success_message
        assert result.message.startswith("✓")

    @pytest.mark.parametrize("cls,name,prefix,latency,rate", VARIANTS)
    @pytest.mark.asyncio
    async def test_decline_resolves_without_raising(
        self, cls, name, prefix, latency, rate, always_decline, no_delay
    ):
        result = await cls(rng=always_decline, delay=no_delay).process_payment(50)

        assert result.success is False
        assert result.message == cls.PROFILE.failure_message
        assert result.message.startswith("✗")
        assert result.provider == name

    @pytest.mark.asyncio
    async def test_outcome_is_immutable(self, seeded_rng, no_delay):
        result = await ApplePayProvider(rng=seeded_rng, delay=no_delay).process_payment(10)
        with pytest.raises(ValidationError):
            result.success = not result.success


class TestSuccessRates:

    @pytest.mark.parametrize("cls,name,prefix,latency,rate", VARIANTS)
    @pytest.mark.asyncio
    async def test_empirical_rate_within_five_points(
        self, cls, name, prefix, latency, rate, seeded_rng, no_delay
    ):
        provider = cls(rng=seeded_rng, delay=no_delay)
        results = [await provider.process_payment(10) for _ in range(1000)]

        observed = sum(r.success for r in results) / len(results)
        assert abs(observed - rate) <= 0.05


class TestLatency:

    @pytest.mark.parametrize("cls,latency", [
        (ApplePayProvider, 800),
        (PayPalProvider, 1500),
        (CreditCardProvider, 2000),
    ])
    @pytest.mark.asyncio
    async def test_resolves_after_profile_latency(self, cls, latency):
        start = time.perf_counter()
        await cls().process_payment(25)
        elapsed_ms = (time.perf_counter() - start) * 1000

        assert latency - 100 <= elapsed_ms <= latency + 100

    @pytest.mark.asyncio
    async def test_apple_pay_is_fastest(self):
        timings = {}

        async def timed(provider):
            start = time.perf_counter()
            await provider.process_payment(10)
            timings[provider.get_name()] = time.perf_counter() - start

        await asyncio.gather(
            timed(ApplePayProvider()),
            timed(PayPalProvider()),
            timed(CreditCardProvider()),
        )
        assert timings["Apple Pay"] < timings["PayPal"] < timings["Credit Card"]
