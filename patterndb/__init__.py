"""Compile authored inconsiderate/considerate phrase lists into patterns.json."""

from .errors import PatternError, ShapeError, ValidationViolation
from .pipeline import build, compile_patterns

__all__ = ["PatternError", "ShapeError", "ValidationViolation", "build", "compile_patterns"]
