import logging
from collections.abc import Awaitable, Callable
from typing import Any
from urllib.parse import urlsplit, urlunsplit

import httpx

from app.models import RESOURCE_TYPES, Resource, ResourceType

from .blocklist import DomainBlocklist
from .fallback import DEFAULT_LIMIT, FallbackResourceBank, dedupe_resources
from .relevance import TopicRelevance

logger = logging.getLogger(__name__)

type UrlProbe = Callable[[str], Awaitable[bool]]

ALLOWED_SCHEMES = frozenset({'http', 'https'})


def normalize_type(value: Any) -> ResourceType:
    """Unknown resource types become ``article``"""
    if isinstance(value, str) and value in RESOURCE_TYPES:
        return value  # pyright: ignore[reportReturnType]
    return 'article'


def parse_absolute_url(raw: str) -> httpx.URL | None:
    """
    Parse an absolute URL into its canonical form; ``None`` if it is not one.

    Scheme and host are lower-cased, an empty path becomes ``/`` and characters
    not allowed in a URL are percent-encoded.
    """
    try:
        parts = urlsplit(raw.strip())
        hostname = parts.hostname
        port = parts.port
    except ValueError:
        return None

    if not parts.scheme or not hostname:
        return None

    netloc = hostname if ':' not in hostname else f'[{hostname}]'
    if port is not None:
        netloc = f'{netloc}:{port}'
    if '@' in parts.netloc:
        netloc = f'{parts.netloc.rpartition("@")[0]}@{netloc}'

    canonical = parts._replace(scheme=parts.scheme.lower(), netloc=netloc, path=parts.path or '/')
    try:
        return httpx.URL(urlunsplit(canonical))
    except httpx.InvalidURL:
        return None


class ResourceNormalizer:
    """
    Validates one raw resource record coming from the model.

    Checks run cheapest first and the network probe last. Any failure yields
    ``None``; nothing is raised for malformed input.
    """

    def __init__(
        self,
        probe: UrlProbe,
        *,
        blocklist: DomainBlocklist | None = None,
        relevance: TopicRelevance | None = None,
    ):
        self._probe: UrlProbe = probe
        self._blocklist: DomainBlocklist = blocklist or DomainBlocklist()
        self._relevance: TopicRelevance = relevance or TopicRelevance()

    async def normalize(self, raw: Any, topic_text: str) -> Resource | None:
        if not isinstance(raw, dict):
            logger.debug('Rejected non-object resource: %r', raw)
            return None

        url, title = raw.get('url'), raw.get('title')
        if not url or not title:
            logger.debug('Rejected resource without url or title: %r', raw)
            return None

        if self._relevance.is_off_topic(raw, topic_text):
            logger.debug('Rejected off-topic resource for %r: %s', topic_text, url)
            return None

        parsed = parse_absolute_url(url) if isinstance(url, str) else None
        if parsed is None:
            logger.debug('Rejected malformed url: %r', url)
            return None
        if parsed.scheme not in ALLOWED_SCHEMES:
            logger.debug('Rejected url with scheme %r: %s', parsed.scheme, url)
            return None
        if self._blocklist.is_blocked(parsed.host):
            logger.debug('Rejected blocklisted host: %s', url)
            return None

        safe_url = str(parsed)
        if not await self._probe(safe_url):
            logger.debug('Rejected unreachable url: %s', safe_url)
            return None

        clean_title = str(title).strip()
        if not clean_title:
            return None

        return Resource(type=normalize_type(raw.get('type')), title=clean_title, url=safe_url)


class ResourceListValidator:
    """
    Turns a node's raw resource list into at most ``limit`` safe resources.

    Candidates are normalized in order, one at a time, and iteration stops as
    soon as ``limit`` survivors are collected. When nothing survives, the
    fallback bank supplies the list instead.
    """

    def __init__(
        self,
        normalizer: ResourceNormalizer,
        fallback_bank: FallbackResourceBank,
        limit: int = DEFAULT_LIMIT,
    ):
        self._normalizer: ResourceNormalizer = normalizer
        self._fallback_bank: FallbackResourceBank = fallback_bank
        self._limit: int = limit

    async def validate(self, raw_resources: Any, topic_text: str) -> list[Resource]:
        if not isinstance(raw_resources, list):
            raw_resources = []

        cleaned: list[Resource] = []
        for raw in raw_resources:
            if len(cleaned) >= self._limit:
                break
            resource = await self._normalizer.normalize(raw, topic_text)
            if resource is not None:
                cleaned.append(resource)

        if not cleaned:
            cleaned = self._fallback_bank.get(topic_text)

        return dedupe_resources(cleaned)[: self._limit]
