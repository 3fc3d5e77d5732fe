"""Placeholder values used when a column value is absent."""

from __future__ import annotations

import datetime
import math
from typing import Any

import numpy

# ── Per-type defaults ──────────────────────────────────────────────
DEFAULT_BOOLEAN = numpy.bool_(False)
DEFAULT_BYTE = numpy.int8(0)
DEFAULT_SHORT = numpy.int16(0)
DEFAULT_INTEGER = numpy.int32(0)
DEFAULT_LONG = numpy.int64(0)
DEFAULT_FLOAT = numpy.float32('nan')
DEFAULT_DOUBLE = numpy.float64('nan')
DEFAULT_TIMESTAMP = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
DEFAULT_STRING = None   # string kinds have no placeholder


def is_default(value: Any, descriptor: Any) -> bool:
    """Check if *value* is the default placeholder of *descriptor*.

    NaN defaults compare equal to any NaN.
    """
    default = descriptor.default_value
    if default is None:
        return value is None
    if isinstance(default, (float, numpy.floating)) and math.isnan(default):
        return isinstance(value, (float, numpy.floating)) and math.isnan(value)
    if value is None:
        return False
    return bool(value == default)
