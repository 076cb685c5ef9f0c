"""Helper utilities for audit logging."""

import secrets

from wgkit.utils import get_iso_timestamp

__all__ = ["generate_run_id"]


def generate_run_id() -> str:
    """Generate unique run identifier.

    Returns
    -------
    str
        Run ID in format: ISO8601_timestamp__random_suffix.
    """
    return f"{get_iso_timestamp()}__{secrets.token_hex(4)}"
