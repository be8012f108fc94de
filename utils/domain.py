from urllib.parse import urlparse

_strip_www = lambda host: host[4:] if host.startswith('www.') else host


def normalize_domain(value: str) -> str:
    """
    Reduce a domain or website URL to a bare host.

    "https://www.example.com/", "example.com" and "WWW.EXAMPLE.COM" all
    become "example.com".
    """
    host = (value or '').strip().lower()
    for prefix in ('https://', 'http://'):
        if host.startswith(prefix):
            host = host[len(prefix):]
            break
    host = host.lstrip('/')
    for sep in ('/', '?', '#'):
        host = host.split(sep, 1)[0]
    return _strip_www(host)


base_url_for = lambda domain: f"https://{normalize_domain(domain)}"


def host_of(url: str) -> str:
    """Lowercased host of a URL without a leading www."""
    try:
        return _strip_www((urlparse(url).hostname or '').lower())
    except ValueError:
        return ''


def same_host(url: str, base_url: str) -> bool:
    """True when url lives on the same host as base_url (www. ignored)."""
    host = host_of(url)
    return bool(host) and host == host_of(base_url)
