import time
import requests
from typing import Callable, Dict, Optional

from models.enums import FetchStatus
from config import REQUEST_TIMEOUT, USER_AGENT, ACCEPT_HEADER, POLITE_DELAY_SECONDS

# A fetch capability: url -> result dict (see fetch_page)
Fetch = Callable[[str], Dict]

_BINARY_CONTENT_TYPES = ('application/pdf', 'image/', 'audio/', 'video/', 'application/zip', 'application/octet-stream')

# Helper functions for DRY
_success_result = lambda url, final_url, status_code, text: {
    'url': url, 'final_url': final_url, 'status_code': status_code, 'html': text,
    'status': FetchStatus.SUCCESS.value, 'error_message': None
}

_error_result = lambda url, status, message, status_code=0: {
    'url': url, 'final_url': url, 'status_code': status_code, 'html': '',
    'status': status.value, 'error_message': message
}

is_success = lambda result: result['status'] == FetchStatus.SUCCESS.value
_is_binary = lambda content_type: any(kind in content_type.lower() for kind in _BINARY_CONTENT_TYPES)

_CHUNK_SIZE = 8192


def _read_body(response, deadline: float) -> Optional[bytes]:
    """Read a streamed body, or None once the overall deadline passes"""
    chunks = []
    for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
        if time.monotonic() > deadline:
            return None
        chunks.append(chunk)
    return b''.join(chunks)


def _decode(body: bytes, encoding: Optional[str]) -> str:
    try:
        return body.decode(encoding or 'utf-8', errors='replace')
    except LookupError:
        return body.decode('utf-8', errors='replace')


def fetch_page(url: str, timeout: float = REQUEST_TIMEOUT,
               session: Optional[requests.Session] = None,
               user_agent: str = USER_AGENT) -> Dict:
    """
    Fetch a single page once. Never raises for network problems.

    The timeout bounds the whole request: connect, headers and body. A server
    that keeps trickling bytes past it is cut off and reported as a timeout.

    Returns:
        {
            'url': str,
            'final_url': str,  # after redirects
            'status_code': int,  # 0 when no response arrived
            'html': str,
            'status': str,  # "success" | "error" | "timeout"
            'error_message': str | None
        }
    """
    client = session or requests
    deadline = time.monotonic() + timeout
    try:
        response = client.get(url, headers={'User-Agent': user_agent, 'Accept': ACCEPT_HEADER},
                              timeout=timeout, allow_redirects=True, stream=True)
    except requests.Timeout:
        return _error_result(url, FetchStatus.TIMEOUT, f'Request timeout after {timeout}s')
    except requests.RequestException as e:
        return _error_result(url, FetchStatus.ERROR, str(e))

    try:
        if not 200 <= response.status_code < 300:
            return _error_result(url, FetchStatus.ERROR, f'HTTP_{response.status_code}', response.status_code)

        content_type = response.headers.get('Content-Type', '')
        if _is_binary(content_type):
            return _error_result(url, FetchStatus.ERROR, f'Unsupported content type: {content_type}',
                                 response.status_code)

        try:
            body = _read_body(response, deadline)
        except requests.Timeout:
            body = None
        except requests.RequestException as e:
            return _error_result(url, FetchStatus.ERROR, str(e), response.status_code)
        if body is None:
            return _error_result(url, FetchStatus.TIMEOUT, f'Request timeout after {timeout}s',
                                 response.status_code)

        text = _decode(body, response.encoding)
        return _success_result(url, response.url or url, response.status_code, text)
    finally:
        response.close()


class HttpFetcher:
    """
    Shared fetch capability: one session, fixed headers, a request timeout
    and a polite pause between consecutive requests. No retries.
    """

    def __init__(self, timeout: float = REQUEST_TIMEOUT, delay: float = POLITE_DELAY_SECONDS,
                 user_agent: str = USER_AGENT, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.delay = max(0.0, delay)
        self.user_agent = user_agent
        self.session = session or requests.Session()
        self._last_request_at = None

    def _wait_politely(self):
        if self.delay and self._last_request_at is not None:
            remaining = self.delay - (time.monotonic() - self._last_request_at)
            if remaining > 0:
                time.sleep(remaining)

    def __call__(self, url: str) -> Dict:
        self._wait_politely()
        try:
            return fetch_page(url, timeout=self.timeout, session=self.session, user_agent=self.user_agent)
        finally:
            self._last_request_at = time.monotonic()

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
