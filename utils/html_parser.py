import re
from typing import List, Optional
from urllib.parse import urljoin, urldefrag

from bs4 import BeautifulSoup

from config import MAX_TEXT_LENGTH, MAX_HEADING_LENGTH
from models.schemas import ExtractedPage

# Elements that never carry bio text
_NOISE_TAGS = ['title', 'script', 'style', 'noscript', 'template', 'nav', 'footer', 'svg', 'iframe']
_SKIP_HREF_PREFIXES = ('mailto:', 'tel:', 'javascript:', 'data:', '#')

_collapse = lambda text: re.sub(r'\s+', ' ', text or '').strip()
_soup = lambda html: BeautifulSoup(html or '', 'html.parser')


def _first_text(soup: BeautifulSoup, tag_name: str) -> Optional[str]:
    """Whitespace-collapsed text of the first matching tag, or None"""
    tag = soup.find(tag_name)
    if not tag:
        return None
    text = _collapse(tag.get_text(' '))[:MAX_HEADING_LENGTH]
    return text or None


pick_h1 = lambda html: _first_text(_soup(html), 'h1')
pick_title = lambda html: _first_text(_soup(html), 'title')


def html_to_text(html: str, max_length: int = MAX_TEXT_LENGTH) -> str:
    """
    Convert raw HTML to plain text for the heuristics.

    Args:
        html: Raw HTML string
        max_length: Truncate the collapsed text to this many characters

    Returns:
        Single-line text with markup, scripts and styles removed
    """
    soup = _soup(html)
    for tag in soup(_NOISE_TAGS):
        tag.decompose()
    return _collapse(soup.get_text(' '))[:max_length]


def extract_page(url: str, html: str) -> ExtractedPage:
    """Split a fetched page into heading, title and body text"""
    return ExtractedPage(url=url, raw_text=html_to_text(html), heading=pick_h1(html), title=pick_title(html))


def extract_links(html: str, page_url: str) -> List[str]:
    """
    Scan every element carrying an href and resolve it to an absolute URL.

    Fragments are dropped; order of first appearance is preserved.
    """
    links = {}
    for element in _soup(html).find_all(href=True):
        href = element['href'].strip()
        if not href or href.lower().startswith(_SKIP_HREF_PREFIXES):
            continue
        absolute, _ = urldefrag(urljoin(page_url, href))
        if absolute.startswith(('http://', 'https://')):
            links.setdefault(absolute, None)
    return list(links)
