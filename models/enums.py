from enum import Enum

class FetchStatus(str, Enum):
    """Page fetch status"""
    SUCCESS = "success"
    ERROR = "error"
    TIMEOUT = "timeout"

class DiscoverySource(str, Enum):
    """Where candidate profile URLs came from"""
    SITEMAP = "sitemap"
    PROBE = "probe"
    NONE = "none"

class PageOutcome(str, Enum):
    """Result of processing one candidate profile page"""
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    FETCH_FAILED = "fetch_failed"
