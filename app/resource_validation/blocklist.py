from collections.abc import Iterable

from .data import BLOCKED_DOMAINS


def clean_hostname(hostname: str) -> str:
    """Lower-case a hostname and drop a leading ``www.``"""
    return hostname.lower().removeprefix('www.')


class DomainBlocklist:
    """Rejects hosts that equal a blocked domain or are subdomains of one"""

    def __init__(self, domains: Iterable[str] = BLOCKED_DOMAINS):
        self._domains: frozenset[str] = frozenset(d.lower() for d in domains)

    def is_blocked(self, hostname: str) -> bool:
        clean = clean_hostname(hostname)
        return any(clean == domain or clean.endswith(f'.{domain}') for domain in self._domains)

