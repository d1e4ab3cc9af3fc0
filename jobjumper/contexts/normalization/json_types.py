"""
Generic JSON value type.

Model output is parsed into plain Python JSON data (None, bool, int, float,
str, list, dict) and only interpreted as a specific record by the validators.
"""

import math
from typing import Any, Dict, List, Union

JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


def is_number(value: Any) -> bool:
    """True for finite ints and floats. bool is not a number here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)
