"""Sequence helpers for pattern lines"""

from typing import Hashable, Iterable, List, TypeVar

from git_ignore.domain.errors import PatternValidationError

T = TypeVar("T", bound=Hashable)


def unique(items: Iterable[T]) -> List[T]:
    """Return items with duplicates dropped, keeping first occurrences in order

    Args:
        items: Items to deduplicate

    Returns:
        New list where every distinct value appears once
    """
    seen = set()
    result = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


def remove(items: Iterable[T], element: T) -> List[T]:
    """Return items without any value equal to element"""
    return [item for item in items if item != element]


def validate_pattern(pattern: str) -> str:
    """Reject empty patterns

    Raises:
        PatternValidationError: If pattern is empty
    """
    if not pattern:
        raise PatternValidationError("No pattern provided")
    return pattern
