from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from .models import OutputEntry, RawEntry
from .normalize import assemble_entry, normalize_entry
from .rules import DATA_DIR, OUTPUT_PATH, SOURCE_NAMES
from .sources import load_sources, write_patterns
from .validate import validate

logger = logging.getLogger(__name__)


def compile_patterns(raw_entries: Sequence[RawEntry]) -> List[OutputEntry]:
    """Normalize, assemble and validate a corpus. Raises on the first violation."""
    entries = [assemble_entry(normalize_entry(raw)) for raw in raw_entries]
    validate(entries)

    phrases = sum(len(entry.inconsiderate) for entry in entries)
    logger.info("Compiled %d entries (%d inconsiderate phrases)", len(entries), phrases)
    return entries


def build(
    source_dir: Path = DATA_DIR,
    names: Sequence[str] = SOURCE_NAMES,
    output_path: Path = OUTPUT_PATH,
) -> List[OutputEntry]:
    entries = compile_patterns(load_sources(Path(source_dir), names))
    write_patterns(entries, Path(output_path))
    logger.info("Wrote %s", output_path)
    return entries
