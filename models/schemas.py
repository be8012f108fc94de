from dataclasses import dataclass, field
from typing import List, Optional

from models.enums import DiscoverySource


@dataclass
class ExtractedPage:
    url: str
    raw_text: str
    heading: Optional[str] = None
    title: Optional[str] = None


@dataclass
class Classification:
    accepted: bool
    role: str = ""
    confidence: float = 0.0
    bio_signals: int = 0
    reason: Optional[str] = None


@dataclass
class DiscoveryResult:
    source: DiscoverySource = DiscoverySource.NONE
    profile_urls: List[str] = field(default_factory=list)
    index_pages: List[str] = field(default_factory=list)  # probe paths that answered 2xx
    sitemap_urls: List[str] = field(default_factory=list)  # sitemaps actually read
