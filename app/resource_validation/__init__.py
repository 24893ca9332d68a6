"""Validation and repair of model-suggested learning resources"""

import httpx

from .blocklist import DomainBlocklist
from .fallback import FallbackResourceBank
from .reachability import ReachabilityChecker
from .relevance import KeywordClassifier, TopicRelevance
from .resources import ResourceListValidator, ResourceNormalizer
from .tree import TreeSanitizer


def build_tree_sanitizer(
    client: httpx.AsyncClient, *, timeout: float = 5.0, limit: int = 3
) -> TreeSanitizer:
    """Wire the default registries and a reachability probe into a tree sanitizer"""
    normalizer = ResourceNormalizer(
        ReachabilityChecker(client, timeout=timeout),
        blocklist=DomainBlocklist(),
        relevance=TopicRelevance(),
    )
    validator = ResourceListValidator(normalizer, FallbackResourceBank(limit=limit), limit=limit)
    return TreeSanitizer(validator)


__all__ = [
    'DomainBlocklist',
    'FallbackResourceBank',
    'KeywordClassifier',
    'ReachabilityChecker',
    'ResourceListValidator',
    'ResourceNormalizer',
    'TopicRelevance',
    'TreeSanitizer',
    'build_tree_sanitizer',
]
