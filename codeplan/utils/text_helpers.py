"""Text truncation utilities for display."""

from __future__ import annotations


def truncate_chars(text: str, max_chars: int = 200) -> str:
    """Truncate text to maximum number of characters.

    Args:
        text: Text to truncate
        max_chars: Maximum number of characters to keep

    Returns:
        str: Truncated text with ellipsis if truncated
    """
    if len(text) <= max_chars:
        return text

    truncated = text[:max_chars]
    return f"{truncated}... ({len(text) - max_chars} more chars)"


def format_optional(value: object, placeholder: str = "-") -> str:
    """Render None and empty collections as a placeholder."""
    if value is None:
        return placeholder
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value) if value else placeholder
    return str(value)
