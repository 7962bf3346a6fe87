"""
Helpers for remote entity handles and result envelopes.

Array results of the web service come back wrapped in an element named after
the item type (e.g. {'CurrentInvoiceHandle': [...]}). zeep sometimes flattens
that wrapper and sometimes does not, so unwrapping accepts both shapes.
"""

from typing import Any, List, Mapping


def get_field(value: Any, name: str, default: Any = None) -> Any:
    """Read a field from a mapping or an object."""
    if isinstance(value, Mapping):
        return value.get(name, default)
    return getattr(value, name, default)


def has_field(value: Any, name: str) -> bool:
    """True if value is a handle carrying a non-empty `name` field (0 counts)."""
    if value is None or isinstance(value, (str, bytes, int, float)):
        return False
    field = get_field(value, name)
    return field is not None and field != ''


def unwrap(result: Any, element: str) -> Any:
    """Strip the named wrapper element from a result, if present."""
    if isinstance(result, Mapping) and element in result:
        return result[element]
    return result


def as_list(value: Any) -> List[Any]:
    """Normalize None, a single item or a sequence to a list."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]
