# licenser/models/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from licenser.config_parsers.settings import PERCENT_FORMAT

# shared types
SpdxId = str
Bigram = Tuple[str, str]


class LicenseMetadata(BaseModel):
    """YAML metadata block of a catalog record."""

    # choosealicense.com records carry extra keys (nickname, featured, hidden, note)
    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str
    spdx_id: str = Field(alias="spdx-id", min_length=1)
    redirect_from: Optional[str] = None
    source: Optional[str] = None
    description: Optional[str] = None
    how: Optional[str] = None
    conditions: List[str] = Field(default_factory=list)
    permissions: List[str] = Field(default_factory=list)
    limitations: List[str] = Field(default_factory=list)
    using: List[Dict[str, str]] = Field(default_factory=list)

    @field_validator("conditions", "permissions", "limitations", "using", mode="before")
    @classmethod
    def _empty_key_is_empty_list(cls, v):
        # "conditions:" with nothing after it loads as None
        return [] if v is None else v


@dataclass(frozen=True)
class LicenseRecord:
    title: str
    spdx_id: SpdxId
    text: str
    redirect_from: Optional[str] = None
    source: Optional[str] = None
    description: Optional[str] = None
    how: Optional[str] = None
    conditions: Tuple[str, ...] = ()
    permissions: Tuple[str, ...] = ()
    limitations: Tuple[str, ...] = ()
    # read-only views; mappings are not hashable so they stay out of __hash__
    using: Tuple[Mapping[str, str], ...] = field(default=(), hash=False)
    path: Optional[Path] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_metadata(cls, meta: LicenseMetadata, text: str, path: Optional[Path] = None) -> "LicenseRecord":
        return cls(
            title=meta.title,
            spdx_id=meta.spdx_id,
            text=text,
            redirect_from=meta.redirect_from,
            source=meta.source,
            description=meta.description,
            how=meta.how,
            conditions=tuple(meta.conditions),
            permissions=tuple(meta.permissions),
            limitations=tuple(meta.limitations),
            using=tuple(MappingProxyType(dict(u)) for u in meta.using),
            path=path,
        )


@dataclass(frozen=True)
class MatchResult:
    license: LicenseRecord
    coefficient: float

    @property
    def spdx_id(self) -> SpdxId:
        return self.license.spdx_id

    @property
    def percent(self) -> float:
        return self.coefficient * 100.0

    def format_percent(self) -> str:
        """Coefficient as a percentage with two decimals, e.g. '97.31'."""
        return PERCENT_FORMAT.format(self.percent)

    def __str__(self) -> str:
        return f"{self.spdx_id}\t{self.format_percent()}"
