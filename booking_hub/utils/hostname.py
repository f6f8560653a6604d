"""
Hostname helpers — turn Host headers, referrers and overrides into tenant keys.
"""
import re
from typing import Optional
from urllib.parse import urlsplit

# Labels of letters, digits and hyphens; no underscores or wildcards.
_HOSTNAME_RE = re.compile(
    r"^(?=.{1,253}$)[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?(?:\.[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)*$"
)


def normalize_hostname(value: Optional[str]) -> Optional[str]:
    """
    Reduce a host, URL or host:port string to a bare lower-case hostname.

    Scheme, credentials, port, path, query and a trailing dot are removed.
    Returns None when nothing hostname-shaped is left.

    >>> normalize_hostname("https://A.Example.com:8443/booking?x=1")
    'a.example.com'
    """
    if not value:
        return None

    candidate = value.strip()
    if not candidate:
        return None

    if "://" not in candidate:
        candidate = f"//{candidate}"

    try:
        host = urlsplit(candidate).hostname
    except ValueError:
        return None

    if not host:
        return None

    host = host.rstrip(".").lower()
    if not _HOSTNAME_RE.match(host):
        return None
    return host
