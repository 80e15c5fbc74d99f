"""
Path parameter parsing.
"""

from __future__ import annotations

import re

from fastapi import HTTPException, status

# Ids and counts are stored in 32-bit integer columns.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1

# Plain ASCII digits only; int() would also take "1_0" or non-ASCII digits.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_id(raw: str, detail: str) -> int:
    """
    Turn a raw path segment into an integer id or fail with 400.
    """
    text = (raw or "").strip()
    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    value = int(text)
    if not INT4_MIN <= value <= INT4_MAX:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    return value
