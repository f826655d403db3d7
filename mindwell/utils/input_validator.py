"""Free-text input validation.

Rejects descriptions that are too short or too long, or that look like
promotional spam, before any analysis runs.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from mindwell.core.config import settings


class InvalidInputError(ValueError):
    """User input was rejected; ``reason`` is safe to show to the user."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True, slots=True)
class ValidationResult:
    is_valid: bool
    reason: Optional[str] = None


class InputValidator:
    """Length and deny-list checks for free-text descriptions."""

    TOO_SHORT_REASON = "Please provide more details about how you're feeling"
    TOO_LONG_REASON = "Please keep your message under {max_length} characters"
    SPAM_REASON = "Please focus on your mental health concerns"

    SPAM_PATTERNS = [
        re.compile(r"\b(spam|advertisement|buy now|click here)\b", re.IGNORECASE),
        re.compile(r"\b(viagra|casino|lottery|winner)\b", re.IGNORECASE),
    ]

    def __init__(self, min_length: Optional[int] = None, max_length: Optional[int] = None):
        self.min_length = settings.MIN_INPUT_LENGTH if min_length is None else min_length
        self.max_length = settings.MAX_INPUT_LENGTH if max_length is None else max_length

    def validate(self, text: Optional[str]) -> ValidationResult:
        # Minimum applies to the trimmed text, maximum to the raw text
        if not text or len(text.strip()) < self.min_length:
            return ValidationResult(False, self.TOO_SHORT_REASON)

        if len(text) > self.max_length:
            return ValidationResult(False, self.TOO_LONG_REASON.format(max_length=self.max_length))

        for pattern in self.SPAM_PATTERNS:
            if pattern.search(text):
                return ValidationResult(False, self.SPAM_REASON)

        return ValidationResult(True)

    def ensure_valid(self, text: Optional[str]) -> str:
        result = self.validate(text)
        if not result.is_valid:
            raise InvalidInputError(result.reason or self.TOO_SHORT_REASON)
        return text  # type: ignore[return-value]


def validate_user_input(text: Optional[str]) -> ValidationResult:
    """Convenience wrapper using the configured length limits."""
    return InputValidator().validate(text)
