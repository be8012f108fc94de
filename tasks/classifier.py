"""
Human-schema pass: decide whether a page describes one real person.

Pure functions, no I/O. Name acceptance rejects navigation and marketing
headings; role keywords and bio vocabulary decide acceptance and drive the
confidence score.
"""

import re
from typing import Optional

from models.schemas import Classification, ExtractedPage

ROLE_KEYWORDS = [
    'Partner',
    'Associate',
    'Counsel',
    'Attorney',
    'Lawyer',
    'Of Counsel',
    'Shareholder',
    'Principal',
    'Managing Partner',
    'Chair',
]

REJECT_TOKENS = {t.casefold() for t in (
    'People', 'Our People', 'Professionals', 'Attorneys', 'Lawyers', 'Team',
    'Leadership', 'Overview', 'About', 'Where Innovation Meets the Law',
    'Careers', 'Services', 'Industries',
)}

NAV_WORDS = {'overview', 'about', 'innovation', 'people', 'team', 'leadership'}

BIO_SIGNALS = ['practice', 'experience', 'clients', 'education', 'bar admissions', 'represent', 'matters']

BASE_CONFIDENCE = 0.55
ROLE_BONUS = 0.25
BIO_SIGNAL_WEIGHT = 0.05
MAX_BIO_BONUS = 0.20
MIN_CONFIDENCE, MAX_CONFIDENCE = 0.55, 0.98
MIN_BIO_SIGNALS = 2
DEFAULT_ROLE = 'Attorney'

# Letters, digits, underscore and hyphen all extend a word: "partnership",
# "non-partner" and "partner-track" are not the role "Partner".
_ROLE_PATTERNS = [
    (keyword, re.compile(r'(?<![\w-])' + r'\s+'.join(map(re.escape, keyword.split())) + r'(?![\w-])',
                         re.IGNORECASE))
    for keyword in ROLE_KEYWORDS
]

_clamp = lambda value: max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, value))
_bare_token = lambda token: token.strip('.,;:!?()[]{}"\'').casefold()


def looks_like_person_name(name: Optional[str]) -> bool:
    """Two to five tokens, mostly letters, and nothing that reads like navigation."""
    n = (name or '').strip()
    if not n or n.casefold() in REJECT_TOKENS:
        return False

    parts = n.split()
    if not 2 <= len(parts) <= 5:
        return False
    if any(_bare_token(part) in NAV_WORDS for part in parts):
        return False

    letters = sum(1 for ch in n if ch.isalpha())
    return letters / max(1, len(n)) > 0.55


def detect_role(text: str) -> Optional[str]:
    """First role keyword (in ROLE_KEYWORDS order) found as a whole word."""
    for keyword, pattern in _ROLE_PATTERNS:
        if pattern.search(text or ''):
            return keyword
    return None


def count_bio_signals(text: str) -> int:
    lower = (text or '').lower()
    return sum(1 for signal in BIO_SIGNALS if signal in lower)


def classify(name: Optional[str], body_text: str) -> Classification:
    """
    Run the human-schema pass for one candidate name and its page text.

    Returns:
        Classification; accepted contacts always carry 0.55 <= confidence <= 0.98
    """
    if not looks_like_person_name(name):
        return Classification(accepted=False, reason=f"Not a person name: {name!r}")

    role = detect_role(body_text)
    bio_signals = count_bio_signals(body_text)
    if not role and bio_signals < MIN_BIO_SIGNALS:
        return Classification(accepted=False, bio_signals=bio_signals,
                              reason='No role keyword and too few bio signals')

    confidence = BASE_CONFIDENCE
    if role:
        confidence += ROLE_BONUS
    confidence += min(MAX_BIO_BONUS, bio_signals * BIO_SIGNAL_WEIGHT)

    return Classification(
        accepted=True,
        role=role or DEFAULT_ROLE,
        confidence=round(_clamp(confidence), 2),
        bio_signals=bio_signals,
    )


def select_name(page: ExtractedPage) -> str:
    """Prefer the <h1> when it reads as a name, else the <title> before the first '|'."""
    if page.heading and looks_like_person_name(page.heading):
        return page.heading
    return (page.title or '').split('|')[0].strip()
