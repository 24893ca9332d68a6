from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .data import GARDENING_KEYWORDS, TECH_KEYWORDS

type TopicClassifier = Callable[[str], bool]


def includes_keyword(text: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring test, no tokenization"""
    lowered = text.lower()
    return any(word in lowered for word in keywords)


class KeywordClassifier:
    """Labels text as belonging to a category when any keyword occurs in it"""

    def __init__(self, category: str, keywords: Iterable[str]):
        self.category: str = category
        self._keywords: tuple[str, ...] = tuple(k.lower() for k in keywords)

    def __call__(self, text: str) -> bool:
        return includes_keyword(text, self._keywords)

    def __repr__(self) -> str:
        return f'KeywordClassifier({self.category!r}, {len(self._keywords)} keywords)'


is_tech_topic = KeywordClassifier('technical', TECH_KEYWORDS)
is_gardening_topic = KeywordClassifier('gardening', GARDENING_KEYWORDS)


def resource_text(resource: Mapping[str, Any]) -> str:
    """Text a resource is classified by: its title followed by its URL"""
    return f'{resource.get("title") or ""} {resource.get("url") or ""}'


class TopicRelevance:
    """
    Flags resources that leak technical content into a non-technical topic.

    The rule is deliberately one-directional: a technical topic never rejects a
    non-technical resource, so cross-disciplinary links survive.
    """

    def __init__(
        self,
        is_technical: TopicClassifier = is_tech_topic,
        is_gardening: TopicClassifier = is_gardening_topic,
    ):
        self._is_technical: TopicClassifier = is_technical
        self._is_gardening: TopicClassifier = is_gardening

    def is_off_topic(self, resource: Mapping[str, Any], topic_text: str) -> bool:
        resource_looks_technical = self._is_technical(resource_text(resource))
        if not resource_looks_technical:
            return False
        # gardening topics that also match tech keywords are still guarded
        return not self._is_technical(topic_text) or self._is_gardening(topic_text)
