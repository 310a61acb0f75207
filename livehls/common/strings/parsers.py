# livehls/common/strings/parsers.py
from __future__ import annotations

import math
import re
from typing import Any, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_or_none(v: Any) -> Optional[int]:
    """
    Lenient integer parse for query strings: "720" -> 720, " 720p" -> 720,
    "abc" / "" / None -> None. Only a leading integer prefix is honoured.
    """
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        return int(v) if math.isfinite(v) else None
    m = _LEADING_INT.match(str(v))
    return int(m.group(1)) if m else None


def parse_number(v: Any) -> float:
    """Best-effort numeric coercion for probe JSON fields; anything unusable is 0."""
    if v is None or isinstance(v, bool):
        return 0.0
    try:
        f = float(v)
    except (TypeError, ValueError):
        return 0.0
    return f if math.isfinite(f) else 0.0


def trimmed(v: Any, default: str = "") -> str:
    if v is None:
        return default
    return str(v).strip()
