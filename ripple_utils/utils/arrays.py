"""
List helpers
"""

from typing import Any, List, Iterable, TypeVar

T = TypeVar('T')


def array_set(count: int, value: T) -> List[T]:
    """Return a list of ``count`` items, each equal to ``value``"""
    return [value] * count


def array_unique(values: Iterable[Any]) -> List[Any]:
    """
    Drop repeated values, keeping the first occurrence of each

    Values are compared by their ``str()`` form, so ``1`` and ``"1"`` count as
    the same value and only the first one seen is kept.

    Args:
        values: Values to filter

    Returns:
        New list in original order
    """
    seen = set()
    result: List[Any] = []

    for value in values:
        key = str(value)
        if key in seen:
            continue
        result.append(value)
        seen.add(key)

    return result
