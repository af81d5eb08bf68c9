"""
Deterministic compilation rules.

This file exists to make the fixed inputs and outputs of the build explicit.
"""

import re
from pathlib import Path

SENTINEL_CATEGORY = "a"  # phrases authored without an explicit category
SIMPLE_TYPE = "simple"

# Concatenation order of the source documents; also the order of the artifact.
SOURCE_NAMES = (
    "gender",
    "ablist",
    "relationships",
    "lgbtq",
    "suicide",
)
SOURCE_SUFFIXES = (".yml", ".yaml")

PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_DIR / "data"
OUTPUT_PATH = PACKAGE_DIR.parent / "lib" / "patterns.json"
JSON_INDENT = 2

# Hyphens and apostrophes are stripped by the linter when it searches words.
HYPHEN_PATTERN = re.compile(r"-")
APOSTROPHE_PATTERN = re.compile(r"['’]")
