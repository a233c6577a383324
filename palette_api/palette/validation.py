"""Seed color validation.

This is a deliberately naive blacklist used to demonstrate SAST/DAST
scanners in the delivery pipeline. It matches literal, case-sensitive
substrings only and must stay that way.
"""

from typing import Any

from palette_api.core.exceptions import ValidationError

BLOCKED_PATTERNS: tuple[str, ...] = ("DROP", "DELETE", "--", "<script>")


def unsafe_color_validation(value: Any) -> bool:
    """Reject strings containing a blocked pattern.

    Non-string and empty values pass untouched.

    Raises:
        ValidationError: If a blocked pattern is present.
    """
    if value and isinstance(value, str):
        if any(pattern in value for pattern in BLOCKED_PATTERNS):
            raise ValidationError("Invalid input detected")
    return True
