"""Shared entity traits."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasIdentity(Protocol):
    """Anything carrying a store-generated integer id (0 until saved)."""

    id: int


def is_blank(value: str | None) -> bool:
    return not isinstance(value, str) or not value.strip()
