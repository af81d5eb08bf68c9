"""
Corpus validation.

Checks, in order, stopping at the first failure:
1. Entries not marked ``type: simple`` have at least two categories.
2. Inconsiderate phrases contain no hyphen.
3. Inconsiderate phrases contain no apostrophe unless ``apostrophe: true``.
4. No inconsiderate phrase appears twice across the whole corpus.

Checks 1-3 run per entry in corpus order; check 4 runs once afterwards.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, List, Optional, Sequence

from .errors import (
    ApostropheViolation,
    CategoryCountViolation,
    DuplicatePhraseViolation,
    HyphenViolation,
    ValidationViolation,
)
from .models import OutputEntry
from .rules import APOSTROPHE_PATTERN, HYPHEN_PATTERN, SIMPLE_TYPE

logger = logging.getLogger(__name__)


def _phrase_list(entry: OutputEntry) -> str:
    return ", ".join(entry.inconsiderate)


def check_entry(entry: OutputEntry) -> Optional[ValidationViolation]:
    phrases = list(entry.inconsiderate)

    if entry.type != SIMPLE_TYPE and len(entry.categories) < 2:
        return CategoryCountViolation(
            "Use `type: simple` for entries with a single category: "
            + _phrase_list(entry),
            phrases,
        )

    for phrase in phrases:
        if HYPHEN_PATTERN.search(phrase):
            return HyphenViolation(
                "Avoid hyphens in inconsiderate phrases, "
                "they are stripped when searching for words: " + _phrase_list(entry),
                phrases,
            )

        if APOSTROPHE_PATTERN.search(phrase) and not entry.apostrophe:
            return ApostropheViolation(
                "Avoid apostrophes in inconsiderate phrases, "
                "they are stripped when searching for words "
                "(otherwise, use `apostrophe: true`): " + _phrase_list(entry),
                phrases,
            )

    return None


def find_duplicates(entries: Iterable[OutputEntry]) -> List[str]:
    """Return every inconsiderate phrase used more than once, in first-seen order."""
    counts = Counter(phrase for entry in entries for phrase in entry.inconsiderate)
    return [phrase for phrase, count in counts.items() if count > 1]


def find_violation(entries: Sequence[OutputEntry]) -> Optional[ValidationViolation]:
    for entry in entries:
        violation = check_entry(entry)
        if violation is not None:
            return violation

    duplicates = find_duplicates(entries)
    if duplicates:
        return DuplicatePhraseViolation(
            "Avoid duplicate inconsiderate phrases:\n  " + ", ".join(duplicates),
            duplicates,
        )

    return None


def validate(entries: Sequence[OutputEntry]) -> None:
    violation = find_violation(entries)
    if violation is not None:
        logger.debug("Rule %s failed for: %s", violation.rule, violation.phrases)
        raise violation
