"""
Input sanitization utilities.

Shared sanitization for free text that ends up in LLM prompts.
This module has no dependencies on models or services to avoid circular imports.
"""

import re

from core.constants import MAX_CHAT_MESSAGE_LENGTH


def sanitize_user_input(value: str, max_length: int = MAX_CHAT_MESSAGE_LENGTH) -> str:
    """
    Sanitize user input by removing control characters and limiting length.

    - Removes newlines, carriage returns, tabs, and control characters
    - Collapses multiple spaces into one
    - Strips leading/trailing whitespace
    - Truncates to a maximum length

    Args:
        value: Raw user-provided string
        max_length: Maximum allowed length (default: MAX_CHAT_MESSAGE_LENGTH)

    Returns:
        Sanitized string safe for prompt inclusion
    """
    sanitized = re.sub(r"[\n\r\t\x00-\x1f\x7f-\x9f]", " ", value)
    sanitized = re.sub(r" +", " ", sanitized)
    sanitized = sanitized.strip()
    return sanitized[:max_length]
