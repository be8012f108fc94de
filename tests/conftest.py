import pytest

from models.enums import FetchStatus


class FakeFetcher:
    """
    Deterministic stand-in for HttpFetcher.

    responses maps url -> html (200), status code (int), or (status, html).
    Unknown URLs answer 404. Every requested URL is recorded in .calls.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []
        self.closed = False

    def __call__(self, url):
        self.calls.append(url)
        response = self.responses.get(url, 404)
        status, html = (response, '') if isinstance(response, int) else (
            response if isinstance(response, tuple) else (200, response))
        if 200 <= status < 300:
            return {'url': url, 'final_url': url, 'status_code': status, 'html': html,
                    'status': FetchStatus.SUCCESS.value, 'error_message': None}
        return {'url': url, 'final_url': url, 'status_code': status, 'html': '',
                'status': FetchStatus.ERROR.value, 'error_message': f'HTTP_{status}'}

    def close(self):
        self.closed = True


def sitemap_xml(*locs):
    """Minimal urlset document listing the given page URLs"""
    urls = ''.join(f"<url><loc>{loc}</loc></url>" for loc in locs)
    return ('<?xml version="1.0" encoding="UTF-8"?>'
            f'<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">{urls}</urlset>')


def profile_html(h1, body, title=None):
    title_tag = f"<title>{title}</title>" if title else ''
    return (f"<html><head>{title_tag}<script>var partner = 'x';</script></head>"
            f"<body><nav><a href='/people'>People</a></nav><h1>{h1}</h1><p>{body}</p></body></html>")


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()
