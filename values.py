"""Runtime values: float (number), str (text) and bool (boolean).

Values are plain Python objects. ``bool`` is checked before numbers
everywhere because it is a subclass of ``int``.
"""

import math
import re

# plain decimal or exponent form, or inf/nan; no underscores or padding
NUMBER_TEXT = re.compile(r"[+-]?((\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|inf|infinity|nan)", re.IGNORECASE)

TRUE_LITERAL = "ong_no_cap"
FALSE_LITERAL = "cap"


def type_name(value) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "text"
    return "number"


def is_truthy(value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value != ""
    return value != 0


def to_number(value) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, str):
        if not NUMBER_TEXT.fullmatch(value):
            return 0.0
        return float(value)
    return float(value)


def values_equal(a, b) -> bool:
    # no coercion: different tags are never equal
    if type_name(a) != type_name(b):
        return False
    return a == b


def display(value) -> str:
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if isinstance(value, str):
        return value
    n = float(value)
    if math.isfinite(n) and n.is_integer():
        return str(int(n))
    return repr(n)
