"""
Normalization of authored entries into the published pattern shape.

Responsibilities:
- phrase field coercion (phrase, list of phrases, or phrase -> category map)
- category derivation
- pattern identifier derivation
- note + source folding
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from .models import NormalizedEntry, OutputEntry, PhraseField, PhraseMap, RawEntry
from .rules import SENTINEL_CATEGORY

_WHITESPACE = re.compile(r"\s")


def clean_phrase_field(value: PhraseField) -> PhraseMap:
    """
    Coerce a phrase field to a mapping of phrase -> category.

    Rules:
    - A single phrase is treated as a one-element list.
    - A list maps every phrase to the sentinel category.
    - A mapping already carries its categories and is returned unchanged.
    """
    if isinstance(value, dict):
        return value

    if isinstance(value, str):
        value = [value]

    return {phrase: SENTINEL_CATEGORY for phrase in value}


def derive_categories(inconsiderate: PhraseMap) -> List[str]:
    # dict.fromkeys keeps first-occurrence order
    return list(dict.fromkeys(inconsiderate.values()))


def normalize_entry(raw: RawEntry) -> NormalizedEntry:
    inconsiderate = clean_phrase_field(raw.inconsiderate)
    considerate = clean_phrase_field(raw.considerate)

    return NormalizedEntry(
        type=raw.type,
        note=raw.note,
        source=raw.source,
        apostrophe=raw.apostrophe,
        inconsiderate=inconsiderate,
        considerate=considerate,
        categories=derive_categories(inconsiderate),
    )


def compute_pattern_id(inconsiderate: PhraseMap) -> str:
    """
    Derive a readable, stable identifier from the inconsiderate phrases.

    The shortest phrase of every category is kept (the first one wins a tie),
    its first whitespace character becomes a hyphen, and the fragments are
    sorted and joined with hyphens.
    """
    shortest: Dict[str, str] = {}

    for phrase, category in inconsiderate.items():
        current = shortest.get(category)
        if current is None or len(current) > len(phrase):
            shortest[category] = phrase

    fragments = [_WHITESPACE.sub("-", phrase, count=1) for phrase in shortest.values()]
    return "-".join(sorted(fragments))


def compile_note(note: Optional[str] = None, source: Optional[str] = None) -> Optional[str]:
    if not source:
        return note
    if note:
        return f"{note} (source: {source})"
    return f"Source: {source}"


def assemble_entry(entry: NormalizedEntry) -> OutputEntry:
    return OutputEntry(
        id=compute_pattern_id(entry.inconsiderate),
        type=entry.type,
        apostrophe=True if entry.apostrophe else None,
        categories=list(entry.categories),
        considerate=dict(entry.considerate),
        inconsiderate=dict(entry.inconsiderate),
        note=compile_note(entry.note, entry.source),
    )
