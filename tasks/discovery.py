from typing import Iterable, List
from urllib.parse import urlparse

from config import MAX_PROFILE_CANDIDATES, MAX_CHILD_SITEMAPS
from models.enums import DiscoverySource
from models.schemas import DiscoveryResult
from tasks.fetcher import Fetch, is_success
from utils.domain import same_host
from utils.html_parser import extract_links
from utils.sitemap import parse_sitemap, has_loc

PROFILE_PATH_SIGNALS = (
    '/people/', '/lawyers/', '/attorneys/', '/professionals/',
    '/professional/', '/bio/', '/team/', '/person/',
)

INDEX_ROOTS = {'/', '/about', '/people', '/lawyers', '/attorneys'}

BINARY_EXTENSIONS = ('.pdf', '.jpg', '.jpeg', '.png', '.gif', '.svg', '.webp',
                     '.doc', '.docx', '.zip', '.mp4', '.mp3', '.vcf')

PROBE_PATHS = [
    '/people', '/people/',
    '/lawyers', '/lawyers/',
    '/attorneys', '/attorneys/',
    '/professionals', '/professionals/',
    '/team', '/team/',
    '/our-people', '/our-people/',
    '/who-we-are', '/who-we-are/',
]


def is_likely_profile_url(url: str) -> bool:
    """Path looks like one person's bio page rather than an index or asset."""
    try:
        path = urlparse(url).path.lower()
    except ValueError:
        return False
    if (path.rstrip('/') or '/') in INDEX_ROOTS or path.endswith(BINARY_EXTENSIONS):
        return False
    return any(signal in path for signal in PROFILE_PATH_SIGNALS)


def _profile_urls(urls: Iterable[str], base_url: str) -> List[str]:
    """Same-host profile URLs, deduplicated, in first-seen order."""
    return list(dict.fromkeys(
        url for url in urls if same_host(url, base_url) and is_likely_profile_url(url)
    ))


def _from_sitemap(base_url: str, fetch: Fetch, result: DiscoveryResult) -> List[str]:
    """Read /sitemap.xml (and, for an index, a few child sitemaps)."""
    sitemap_url = f"{base_url}/sitemap.xml"
    response = fetch(sitemap_url)
    if not is_success(response) or not has_loc(response['html']):
        print(f"[DISCOVERY] No usable sitemap at {sitemap_url}")
        return []

    result.sitemap_urls.append(sitemap_url)
    page_urls, child_sitemaps = parse_sitemap(response['html'])
    print(f"[DISCOVERY] Sitemap lists {len(page_urls)} pages, {len(child_sitemaps)} child sitemaps")

    for child_url in [u for u in child_sitemaps if same_host(u, base_url)][:MAX_CHILD_SITEMAPS]:
        child = fetch(child_url)
        if not is_success(child):
            print(f"[DISCOVERY] Child sitemap failed: {child_url} ({child['error_message']})")
            continue
        result.sitemap_urls.append(child_url)
        child_pages, _ = parse_sitemap(child['html'])
        page_urls.extend(child_pages)

    return _profile_urls(page_urls, base_url)


def _from_probes(base_url: str, fetch: Fetch, result: DiscoveryResult) -> List[str]:
    """Probe common index paths and harvest profile links from each."""
    found = []
    for path in PROBE_PATHS:
        response = fetch(f"{base_url}{path}")
        if not is_success(response):
            continue
        result.index_pages.append(response['url'])
        links = extract_links(response['html'], response['final_url'])
        found.extend(_profile_urls(links, base_url))
    print(f"[DISCOVERY] {len(result.index_pages)} index pages answered")
    return list(dict.fromkeys(found))


def discover_profile_urls(base_url: str, fetch: Fetch,
                          max_candidates: int = MAX_PROFILE_CANDIDATES) -> DiscoveryResult:
    """
    Find candidate profile pages for a firm site.

    Sitemap first; path probing only runs when the sitemap yields no
    qualifying profile URL. Individual fetch failures contribute nothing.

    Args:
        base_url: "https://{domain}" with no trailing slash
        fetch: Fetch capability (url -> result dict)
        max_candidates: Hard cap on returned profile URLs

    Returns:
        DiscoveryResult with at most max_candidates profile URLs, in stable order
    """
    base_url = base_url.rstrip('/')
    result = DiscoveryResult()
    print(f"\n[DISCOVERY] Starting profile discovery for {base_url}")

    urls = _from_sitemap(base_url, fetch, result)
    if urls:
        result.source = DiscoverySource.SITEMAP
    else:
        urls = _from_probes(base_url, fetch, result)
        result.source = DiscoverySource.PROBE if urls else DiscoverySource.NONE

    if len(urls) > max_candidates:
        print(f"[DISCOVERY] Capping {len(urls)} candidates to {max_candidates}")
    result.profile_urls = urls[:max_candidates]
    print(f"[DISCOVERY] {len(result.profile_urls)} profile candidates via {result.source.value}")
    return result
