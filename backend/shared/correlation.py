"""Correlation IDs tying a checkout request to its payment log lines."""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    return f"chk_{uuid.uuid4().hex[:16]}"


def get_correlation_id() -> str:
    """Current id; one is minted lazily for work outside a request (scripts, tests)."""
    cid = correlation_id_var.get()
    if not cid:
        cid = generate_correlation_id()
        correlation_id_var.set(cid)
    return cid


@contextmanager
def correlation_scope(cid: str | None = None):
    """Bind ``cid`` (or a fresh id) for the duration of the block."""
    token = correlation_id_var.set(cid or generate_correlation_id())
    try:
        yield correlation_id_var.get()
    finally:
        correlation_id_var.reset(token)
