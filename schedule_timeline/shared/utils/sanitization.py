"""Input sanitization utilities."""

import re


class InputSanitizer:
    """Turn free-form document text into tokens that are safe to render."""

    # Runs of whitespace collapse to a single separator
    WHITESPACE_PATTERN = re.compile(r"\s+")

    # Fallback token for empty or absent values
    DEFAULT_TOKEN = "default"

    @classmethod
    def slugify(cls, value: str | None, default: str = DEFAULT_TOKEN) -> str:
        """
        Slugify a display value into a CSS-safe token.

        Lowercases the value and collapses whitespace runs into a hyphen.
        Empty or absent values map to ``default``.
        """
        if value is None:
            return default

        cleaned = value.strip().lower()
        if not cleaned:
            return default

        return cls.WHITESPACE_PATTERN.sub("-", cleaned)

    @classmethod
    def is_blank(cls, value: str | None) -> bool:
        """Check whether a value is absent or whitespace only."""
        return value is None or not value.strip()


# Convenience functions
def slugify_status(status: str | None) -> str:
    """Slugify an item status into a CSS-safe token."""
    return InputSanitizer.slugify(status)


def is_blank(value: str | None) -> bool:
    """Check whether a value is absent or whitespace only."""
    return InputSanitizer.is_blank(value)
