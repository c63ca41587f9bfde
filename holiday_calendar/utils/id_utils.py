"""
ID conversion utilities for the SQL store.

Holiday ids travel over the wire as opaque strings; the SQL store keys rows
by integer primary key.
"""
from typing import Union, Optional

# Primary keys are signed 64-bit on every supported backend
MAX_ID = 2 ** 63 - 1


def to_int_id(id_value: Union[str, int, None]) -> Optional[int]:
    """
    Convert ID to integer.
    Handles both string and integer IDs.

    Args:
        id_value: ID as string, int, or None

    Returns:
        Integer ID, or None when the value is not a usable primary key
        (non-numeric, zero or negative, or beyond the 64-bit range)
    """
    if id_value is None or isinstance(id_value, bool):
        return None

    if isinstance(id_value, int):
        value = id_value
    elif isinstance(id_value, str):
        try:
            value = int(id_value.strip())
        except ValueError:
            return None
    else:
        return None

    if not 0 < value <= MAX_ID:
        return None
    return value


def to_wire_id(id_value: Union[str, int, None]) -> Optional[str]:
    """Render a store id as the opaque string used on the wire."""
    if id_value is None:
        return None
    return str(id_value)
