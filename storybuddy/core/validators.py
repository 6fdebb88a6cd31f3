"""
Input Validators - Sanitization and validation utilities.

This module provides the boundary validation layer for request fields:
- Text sanitization before prompt interpolation
- Age bounds
- Math operation whitelist
- Prompt-injection heuristics (logged, not blocked)
"""
import re
from typing import Optional, Tuple

from storybuddy.core.logging_config import get_logger

logger = get_logger(__name__)

MIN_AGE = 1
MAX_AGE = 18

MATH_OPERATIONS = ("addition", "subtraction", "multiplication", "division")

# Phrases that try to override the instruction template
SUSPICIOUS_PATTERNS = [
    r"ignore\s+(all\s+)?(the\s+)?(previous|above|prior)\s+instructions",
    r"disregard\s+(all\s+)?(the\s+)?(previous|above|prior)",
    r"you\s+are\s+now\s+",
    r"system\s+prompt",
    r"reveal\s+(your\s+)?instructions",
]

# Compiled patterns for efficiency
_SUSPICIOUS_REGEX = [re.compile(p, re.IGNORECASE) for p in SUSPICIOUS_PATTERNS]


def sanitize_text(text: str, max_length: int = 5000, collapse_whitespace: bool = False) -> str:
    """
    Sanitize caller-supplied text.

    - Removes null bytes
    - Strips leading/trailing whitespace
    - Optionally collapses whitespace runs (single-line fields)
    - Limits length

    Paragraph breaks are kept by default because stories and
    translation input are multi-paragraph.

    Args:
        text: Raw text
        max_length: Maximum allowed length
        collapse_whitespace: Collapse all whitespace runs to one space

    Returns:
        Sanitized text
    """
    if not text:
        return ""

    cleaned = text.replace("\x00", "").strip()

    if collapse_whitespace:
        cleaned = re.sub(r"\s+", " ", cleaned)

    if len(cleaned) > max_length:
        cleaned = cleaned[:max_length]

    return cleaned


def detect_prompt_injection(text: str) -> Tuple[bool, Optional[str]]:
    """
    Check if text contains instruction-override phrases.

    This is a heuristic check - not a security guarantee.

    Args:
        text: Caller text to check

    Returns:
        Tuple of (is_suspicious, matched_pattern)
    """
    for pattern in _SUSPICIOUS_REGEX:
        match = pattern.search(text)
        if match:
            logger.warning(
                f"Suspicious pattern detected: {match.group()[:50]}..."
            )
            return True, match.group()

    return False, None


def validate_text(text: str, field: str, max_length: int, collapse_whitespace: bool = False) -> Tuple[bool, str, Optional[str]]:
    """
    Full validation and sanitization of a text field.

    Args:
        text: Raw text
        field: Field name used in error messages
        max_length: Maximum allowed length after sanitization
        collapse_whitespace: Collapse whitespace runs

    Returns:
        Tuple of (is_valid, sanitized_text, error_message)
    """
    if not text or not text.strip():
        return False, "", f"{field} cannot be empty"

    if len(text.strip()) > max_length:
        return False, "", f"{field} too long (max {max_length} characters)"

    sanitized = sanitize_text(text, max_length=max_length, collapse_whitespace=collapse_whitespace)
    if not sanitized:
        return False, "", f"{field} cannot be empty after sanitization"

    # Warning only, don't block
    is_suspicious, pattern = detect_prompt_injection(sanitized)
    if is_suspicious:
        logger.warning(f"Suspicious {field} detected but allowed: {pattern}")

    return True, sanitized, None


def validate_age(age: int) -> Tuple[bool, Optional[str]]:
    """
    Validate a child's age.

    Args:
        age: Age in years

    Returns:
        Tuple of (is_valid, error_message)
    """
    if age < MIN_AGE or age > MAX_AGE:
        return False, f"age must be between {MIN_AGE} and {MAX_AGE}"
    return True, None


def validate_operation(operation: str) -> Tuple[bool, str, Optional[str]]:
    """
    Validate and normalize a math operation name.

    Matching is case-insensitive; the normalized name is lowercase.

    Args:
        operation: Operation name, e.g. 'Addition'

    Returns:
        Tuple of (is_valid, normalized_operation, error_message)
    """
    normalized = (operation or "").strip().lower()

    if normalized not in MATH_OPERATIONS:
        return False, "", (
            f"Invalid operation: {operation}. "
            f"Must be one of: {', '.join(MATH_OPERATIONS)}"
        )

    return True, normalized, None
