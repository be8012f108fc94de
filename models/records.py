"""
JSON boundary records.

Seeds arrive in several shapes (``firm`` vs ``name``, ``domain`` vs
``website``) and are resolved into one canonical ``FirmSeed`` here.
Output records serialize with camelCase keys.
"""

import math
from numbers import Number
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config import DEFAULT_EXPOSURE_SCORE, DEFAULT_SOURCE
from utils.domain import normalize_domain


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


def _pick_text(record: dict, *keys) -> Optional[str]:
    for key in keys:
        value = record.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


class FirmSeed(_WireModel):
    """Organization to map, resolved from a raw seed record"""
    firm: str
    domain: str
    source: Optional[str] = None
    exposure_score: Optional[Union[int, float]] = Field(default=None, alias='exposureScore')

    @field_validator('domain')
    @classmethod
    def _host_only(cls, value: str) -> str:
        return normalize_domain(value)

    @classmethod
    def from_record(cls, record) -> Optional['FirmSeed']:
        """
        Build a seed from a raw JSON record.

        Precedence: firm name from ``firm`` then ``name``; domain from an
        explicit ``domain`` then derived from ``website``.

        Returns:
            FirmSeed, or None when the record has no usable name or domain
        """
        if not isinstance(record, dict):
            return None

        firm = _pick_text(record, 'firm', 'name')
        raw_domain = _pick_text(record, 'domain') or _pick_text(record, 'website')
        domain = normalize_domain(raw_domain or '')
        if not firm or '.' not in domain:
            return None

        score = record.get('exposureScore')
        if isinstance(score, bool) or not isinstance(score, Number) or not math.isfinite(score):
            score = None

        return cls(
            firm=firm,
            domain=domain,
            source=_pick_text(record, 'source'),
            exposure_score=score,
        )


class MappedContact(_WireModel):
    """One person accepted by the human-schema pass"""
    name: str
    role: str
    source_url: str = Field(alias='sourceUrl')
    evidence_text: str = Field(alias='evidenceText')
    confidence: float


class FirmContacts(_WireModel):
    """Terminal per-firm artifact"""
    firm: str
    domain: str
    source: str = DEFAULT_SOURCE
    exposure_score: Union[int, float] = Field(default=DEFAULT_EXPOSURE_SCORE, alias='exposureScore')
    contacts: List[MappedContact] = Field(default_factory=list)

    @classmethod
    def for_seed(cls, seed: FirmSeed, contacts: List[MappedContact] = None) -> 'FirmContacts':
        return cls(
            firm=seed.firm,
            domain=seed.domain,
            source=seed.source or DEFAULT_SOURCE,
            exposure_score=seed.exposure_score if seed.exposure_score is not None else DEFAULT_EXPOSURE_SCORE,
            contacts=contacts or [],
        )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
