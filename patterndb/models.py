from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# A phrase field is authored as one phrase, a list of phrases, or a mapping
# of phrase to category.
PhraseField = Union[str, List[str], Dict[str, str]]
PhraseMap = Dict[str, str]


class RawEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Optional[str] = None
    note: Optional[str] = None
    source: Optional[str] = None
    apostrophe: Optional[bool] = None
    inconsiderate: PhraseField
    considerate: PhraseField

    @field_validator("apostrophe", mode="before")
    @classmethod
    def _truthy_apostrophe(cls, value):
        # any truthy authored value allows apostrophes
        return None if value is None else bool(value)


class NormalizedEntry(BaseModel):
    type: Optional[str] = None
    note: Optional[str] = None
    source: Optional[str] = None
    apostrophe: Optional[bool] = None
    inconsiderate: PhraseMap = Field(default_factory=dict)
    considerate: PhraseMap = Field(default_factory=dict)
    categories: List[str] = Field(default_factory=list)


class OutputEntry(BaseModel):
    """One record of ``patterns.json``; field order is the serialized order."""

    id: str
    type: Optional[str] = None
    apostrophe: Optional[bool] = Field(default=None, examples=[True])
    categories: List[str] = Field(default_factory=list)
    considerate: PhraseMap = Field(default_factory=dict)
    inconsiderate: PhraseMap = Field(default_factory=dict)
    note: Optional[str] = None

    def to_json_dict(self) -> dict:
        return self.model_dump(exclude_none=True)


class CompileSummary(BaseModel):
    documents: int = 0
    entries: int = 0
    phrases: int = 0


class CompileResponse(BaseModel):
    patterns: List[OutputEntry] = Field(default_factory=list)
    summary: CompileSummary


class HealthResponse(BaseModel):
    ok: bool = True
