"""Helper utilities for audit logging."""

import secrets
from datetime import UTC, datetime

__all__ = ["generate_run_id", "render_key"]


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


def render_key(key: object) -> object:
    """Return ``key`` unchanged if JSON can encode it, else its ``str``.

    Parameters
    ----------
    key : object
        Disjoint-set key.

    Returns
    -------
    object
        A JSON scalar.
    """
    if key is None or isinstance(key, (str, int, float, bool)):
        return key
    return str(key)
