"""Shared FastAPI dependencies."""

from functools import lru_cache

from app.services import SalesCopilot


@lru_cache
def get_copilot() -> SalesCopilot:
    """The process-wide copilot session."""
    return SalesCopilot()
