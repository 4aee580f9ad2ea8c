"""Helper utilities for audit logging.

For timestamp utilities, see unionfind.utils.
"""

import math
import secrets
from collections.abc import Hashable
from datetime import UTC, datetime

__all__ = ["generate_run_id", "to_json_safe"]

_JSON_SCALARS = (str, int, float, bool)


def generate_run_id() -> str:
    """Generate unique run identifier.

    Returns
    -------
    str
        Run ID in format: ISO8601_timestamp__random_suffix.
    """
    timestamp = datetime.now(UTC).isoformat().replace("+00:00", "Z")
    suffix = secrets.token_hex(4)
    return f"{timestamp}__{suffix}"


def to_json_safe(element: Hashable) -> str | int | float | bool:
    """Render an element for a JSON payload.

    JSON scalars are kept as-is; anything else, including non-finite
    floats, is written as its repr().

    Parameters
    ----------
    element : Hashable
        Element to render.

    Returns
    -------
    str | int | float | bool
        JSON-serializable form of element.
    """
    if isinstance(element, float) and not math.isfinite(element):
        return repr(element)
    if isinstance(element, _JSON_SCALARS):
        return element
    return repr(element)
