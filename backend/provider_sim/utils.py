"""Simulation helpers shared by every provider: latency, randomness, transaction ids."""

import asyncio
import random
import string
import time

TOKEN_ALPHABET = string.digits + string.ascii_lowercase
TOKEN_LENGTH = 9


def resolve_rng(rng=None):
    """Return the injected random source, or the process-wide ``random`` module."""
    return rng if rng is not None else random


async def simulate_delay(ms: int) -> None:
    await asyncio.sleep(ms / 1000.0)


def generate_random_string(rng=None, length: int = TOKEN_LENGTH) -> str:
    rng = resolve_rng(rng)
    return "".join(rng.choice(TOKEN_ALPHABET) for _ in range(length))


def generate_transaction_id(prefix: str, rng=None) -> str:
    """Build ``<prefix>-<epoch millis>-<base36 token>``, e.g. ``AP-1718000000000-k3j9x0q2m``."""
    return f"{prefix}-{int(time.time() * 1000)}-{generate_random_string(rng)}"
