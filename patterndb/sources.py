"""
Reading authored source documents and writing the compiled artifact.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Iterable, List, Sequence

import yaml
from charset_normalizer import from_bytes
from pydantic import ValidationError

from .errors import ShapeError
from .models import OutputEntry, RawEntry
from .rules import JSON_INDENT, SOURCE_SUFFIXES

logger = logging.getLogger(__name__)

_BOOL_TAG = "tag:yaml.org,2002:bool"


class SourceLoader(yaml.SafeLoader):
    """Safe loader that only reads `true`/`false` as booleans (YAML 1.2 core).

    Bare phrases such as `on`, `off`, `yes` or `no` stay strings.
    """


SourceLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
SourceLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def decode_document(raw: bytes) -> str:
    """
    Decode source bytes to text.

    Rules:
    - UTF-8 first; a leading BOM is dropped.
    - Otherwise use charset-normalizer's best guess.
    - If nothing decodes, the document is malformed.
    """
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    if match is None:
        raise ShapeError("Unable to detect the encoding of the source document")

    logger.warning("Source document is not UTF-8, decoding as %s", match.encoding)
    return str(match)


def parse_document(text: str, name: str) -> List[RawEntry]:
    try:
        data = yaml.load(text, Loader=SourceLoader)
    except yaml.YAMLError as exc:
        raise ShapeError(f"Invalid YAML in `{name}`: {exc}") from exc

    if data is None:
        return []

    if not isinstance(data, list):
        raise ShapeError(f"`{name}` must contain a list of entries")

    entries: List[RawEntry] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ShapeError(f"Entry {index + 1} in `{name}` must be a mapping")
        try:
            entries.append(RawEntry.model_validate(item))
        except ValidationError as exc:
            raise ShapeError(f"Entry {index + 1} in `{name}` is malformed: {exc}") from exc

    return entries


def load_document(raw: bytes, name: str) -> List[RawEntry]:
    return parse_document(decode_document(raw), name)


def find_document(directory: Path, name: str) -> Path:
    for suffix in SOURCE_SUFFIXES:
        path = directory / (name + suffix)
        if path.is_file():
            return path
    raise ShapeError(f"Missing source document `{name}` in {directory}")


def load_sources(directory: Path, names: Sequence[str]) -> List[RawEntry]:
    """Load every named document and concatenate the entries in order."""
    entries: List[RawEntry] = []

    for name in names:
        path = find_document(directory, name)
        logger.info("Reading %s from %s", name, path)
        document = load_document(path.read_bytes(), name)
        logger.info("Loaded %d entries from %s", len(document), name)
        entries.extend(document)

    return entries


def dump_patterns(entries: Iterable[OutputEntry]) -> str:
    data = [entry.to_json_dict() for entry in entries]
    return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False) + "\n"


def write_patterns(entries: Iterable[OutputEntry], path: Path) -> None:
    """Write the artifact in full or not at all; a previous file stays until replaced."""
    text = dump_patterns(entries)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise
