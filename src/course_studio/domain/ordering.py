from collections.abc import Sequence
from typing import Protocol, TypeVar


class Ordered(Protocol):
    order: int


T = TypeVar("T", bound=Ordered)


def reindex(items: Sequence[Ordered]) -> None:
    """Assign contiguous zero-based order values in list sequence"""
    for position, item in enumerate(items):
        item.order = position


def move(items: list[T], item: T, position: int) -> None:
    """Move item to position (clamped to list bounds) and reindex"""
    items.remove(item)
    position = max(0, min(position, len(items)))
    items.insert(position, item)
    reindex(items)
