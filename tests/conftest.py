import os

import pytest

# Settings are read at import time of app.settings
os.environ.setdefault('LLM_API_KEY', 'test-key')

from app.resource_validation import (  # noqa: E402
    DomainBlocklist,
    FallbackResourceBank,
    ResourceListValidator,
    ResourceNormalizer,
    TopicRelevance,
    TreeSanitizer,
)


class FakeProbe:
    """Reachability stand-in: every URL is reachable unless listed as dead"""

    def __init__(self, dead: set[str] | None = None):
        self.dead = dead or set()
        self.calls: list[str] = []

    async def __call__(self, url: str) -> bool:
        self.calls.append(url)
        return url not in self.dead


@pytest.fixture
def probe():
    return FakeProbe()


@pytest.fixture
def normalizer(probe):
    return ResourceNormalizer(probe, blocklist=DomainBlocklist(), relevance=TopicRelevance())


@pytest.fixture
def validator(normalizer):
    return ResourceListValidator(normalizer, FallbackResourceBank())


@pytest.fixture
def sanitizer(validator):
    return TreeSanitizer(validator)
