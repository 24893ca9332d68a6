import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from urllib.parse import quote

from app.models import Resource

from .data import ENCYCLOPEDIA_BASE_URL, FALLBACK_RESOURCE_BANK
from .relevance import TopicClassifier, is_gardening_topic, is_tech_topic

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 3

_WHITESPACE = re.compile(r'\s+')


def dedupe_resources(resources: Iterable[Resource]) -> list[Resource]:
    """Drop repeated URLs (case-insensitive), keeping the first occurrence"""
    seen: set[str] = set()
    unique = []
    for resource in resources:
        key = resource.url.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(resource)
    return unique


def build_encyclopedia_resource(topic_text: str | None) -> Resource:
    """Encyclopedia article whose slug is the trimmed topic with underscores for spaces"""
    safe_topic = (topic_text or '').strip() or 'Topic'
    slug = quote(_WHITESPACE.sub('_', safe_topic), safe="!~*'()")
    return Resource(
        type='article',
        title=f'Wikipedia - {safe_topic}',
        url=f'{ENCYCLOPEDIA_BASE_URL}{slug}',
    )


class FallbackResourceBank:
    """
    Known-good resources used when every model-suggested link was rejected.

    Parameters
    ----------
    bank:
        Mapping of category name to curated resources; ``gardening`` and
        ``technical`` are consulted.
    is_gardening, is_technical:
        Classifiers picking the category for a topic text. Gardening wins over
        technical when both match.
    limit:
        Maximum number of resources returned.
    """

    def __init__(
        self,
        bank: Mapping[str, Sequence[Resource]] = FALLBACK_RESOURCE_BANK,
        *,
        is_gardening: TopicClassifier = is_gardening_topic,
        is_technical: TopicClassifier = is_tech_topic,
        limit: int = DEFAULT_LIMIT,
    ):
        self._bank: Mapping[str, Sequence[Resource]] = bank
        self._is_gardening: TopicClassifier = is_gardening
        self._is_technical: TopicClassifier = is_technical
        self._limit: int = limit

    def category_for(self, topic_text: str) -> str | None:
        if self._is_gardening(topic_text):
            return 'gardening'
        if self._is_technical(topic_text):
            return 'technical'
        return None

    def get(self, topic_text: str | None) -> list[Resource]:
        text = topic_text or ''
        category = self.category_for(text)
        picks = list(self._bank.get(category, ())) if category else []

        if not picks:
            picks.append(build_encyclopedia_resource(text))

        logger.info('Using %s fallback resources for %r', category or 'generic', text)
        return dedupe_resources(picks)[: self._limit]
