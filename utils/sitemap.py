from typing import List, Tuple
from bs4 import BeautifulSoup


def _locs(elements) -> List[str]:
    urls = {}
    for element in elements:
        loc = element.find('loc')
        text = loc.get_text(strip=True) if loc else ''
        if text:
            urls.setdefault(text, None)
    return list(urls)


def parse_sitemap(xml_content: str) -> Tuple[List[str], List[str]]:
    """
    Extract URLs from sitemap XML.

    Returns:
        (page_urls, child_sitemap_urls), each deduplicated in document order
    """
    try:
        soup = BeautifulSoup(xml_content or '', 'xml')
    except Exception as e:
        print(f"  Sitemap parse error: {e}")
        return [], []

    # Sitemap index (contains other sitemaps)
    child_sitemaps = _locs(soup.find_all('sitemap'))

    # URL set (actual pages)
    page_urls = _locs(soup.find_all('url'))

    # Loose <loc> tags outside <url>/<sitemap> wrappers still count as pages
    if not page_urls and not child_sitemaps:
        page_urls = list(dict.fromkeys(
            loc.get_text(strip=True) for loc in soup.find_all('loc') if loc.get_text(strip=True)
        ))

    return page_urls, child_sitemaps


has_loc = lambda xml_content: '<loc' in (xml_content or '').lower()
