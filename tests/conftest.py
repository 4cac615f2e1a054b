"""
Pytest configuration for CheckoutRail.

- Core tests run providers with a recording no-op delay and a seeded random
  source unless they measure latency on purpose.
- API tests get a fresh DATA_DIR and a TestClient with the lifespan running.
"""

import random

import pytest
from fastapi.testclient import TestClient

from provider_sim.factories import ApplePayFactory, PayPalFactory, CreditCardFactory
from checkout_api.services.payment_service import PaymentService
from checkout_api.services.registry import ProviderRegistry


class RecordingDelay:
    """Stands in for ``simulate_delay``: records the latency, returns at once."""

    def __init__(self):
        self.calls = []

    async def __call__(self, ms: int) -> None:
        self.calls.append(ms)


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns ``value``."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


# ============================================================================
# CORE FIXTURES
# ============================================================================

@pytest.fixture
def no_delay():
    return RecordingDelay()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def always_approve():
    return FixedRandom(0.0)


@pytest.fixture
def always_decline():
    return FixedRandom(0.999999)


@pytest.fixture
def payment_service():
    return PaymentService()


@pytest.fixture
def instant_registry(seeded_rng, no_delay):
    return ProviderRegistry({
        "PayPal": PayPalFactory(rng=seeded_rng, delay=no_delay),
        "Apple Pay": ApplePayFactory(rng=seeded_rng, delay=no_delay),
        "Credit Card": CreditCardFactory(rng=seeded_rng, delay=no_delay),
    })


# ============================================================================
# FASTAPI CLIENT
# ============================================================================

@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def test_client(data_dir, instant_registry):
    """TestClient whose registry charges instantly with a seeded random source."""
    from checkout_api.main import app

    with TestClient(app) as client:
        app.state.registry = instant_registry
        yield client


@pytest.fixture
def sample_products():
    return [
        {"id": 1, "name": "Wireless Headphones", "price": 89.99, "image": "headphones.jpg"},
        {"id": 2, "name": "Smart Watch", "price": 199.50, "image": "watch.jpg"},
    ]
