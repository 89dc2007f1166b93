# backend/utils/parsing.py
import re

_INT_RE = re.compile(r"[+-]?[0-9]+")

# class_id is an INT column
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def parse_int(value):
    """Strict base-10 integer parsing: no whitespace, underscores or decimals."""
    if value is None or not _INT_RE.fullmatch(value):
        raise ValueError(f"invalid integer: {value!r}")
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return number
