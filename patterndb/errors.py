from __future__ import annotations

from typing import List, Optional, Sequence


class PatternError(Exception):
    """Fatal problem with the authored data. Aborts the whole build."""

    rule = "pattern"

    def __init__(self, message: str, phrases: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.message = message
        self.phrases: List[str] = list(phrases or [])

    def to_detail(self) -> dict:
        return {"rule": self.rule, "message": self.message, "phrases": self.phrases}


class ShapeError(PatternError):
    """A source document could not be parsed into raw entries."""

    rule = "shape"


class ValidationViolation(PatternError):
    rule = "validation"


class CategoryCountViolation(ValidationViolation):
    rule = "category-count"


class HyphenViolation(ValidationViolation):
    rule = "hyphen"


class ApostropheViolation(ValidationViolation):
    rule = "apostrophe"


class DuplicatePhraseViolation(ValidationViolation):
    rule = "duplicate"
