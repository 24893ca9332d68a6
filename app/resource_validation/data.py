"""Curated registries used by the resource validators: blocklist, keywords and fallback bank"""

from types import MappingProxyType

from app.models import Resource

# Paid-course marketplaces; subdomains are blocked as well
BLOCKED_DOMAINS: frozenset[str] = frozenset(
    {
        'udemy.com',
        'coursera.org',
        'pluralsight.com',
        'skillshare.com',
        'udacity.com',
        'lynda.com',
        'codecademy.com',
    }
)

# Matched as plain substrings, so short entries ('js', 'ai', 'ml') over-match on purpose
TECH_KEYWORDS: tuple[str, ...] = (
    'javascript',
    'js',
    'typescript',
    'react',
    'angular',
    'vue',
    'svelte',
    'web',
    'frontend',
    'backend',
    'css',
    'html',
    'node',
    'express',
    'python',
    'java',
    'c#',
    'c++',
    'dotnet',
    'docker',
    'kubernetes',
    'sql',
    'database',
    'api',
    'programming',
    'software',
    'developer',
    'mozilla',
    'mdn',
    'freecodecamp',
    'cloud',
    'aws',
    'azure',
    'gcp',
    'ml',
    'ai',
    'data',
    'pandas',
    'numpy',
)

GARDENING_KEYWORDS: tuple[str, ...] = (
    'garden',
    'gardening',
    'horticulture',
    'botany',
    'soil',
    'plant',
    'plants',
    'flowers',
    'vegetable',
    'vegetables',
    'herb',
    'herbs',
    'compost',
    'landscape',
    'yard',
    'lawn',
)

TECH_FALLBACK_RESOURCES: tuple[Resource, ...] = (
    Resource(
        type='article',
        title='MDN Web Docs - Learn Web Development',
        url='https://developer.mozilla.org/en-US/docs/Learn',
    ),
    Resource(
        type='article',
        title='JavaScript.info - The Modern JavaScript Tutorial',
        url='https://javascript.info/',
    ),
    Resource(type='article', title='React.dev - Quick Start', url='https://react.dev/learn'),
    Resource(type='article', title='Node.js - Getting Started', url='https://nodejs.org/en/learn'),
    Resource(
        type='article',
        title='Express - Official Guide',
        url='https://expressjs.com/en/guide/routing.html',
    ),
    Resource(
        type='course',
        title='freeCodeCamp - Responsive Web Design',
        url='https://www.freecodecamp.org/learn/2022/responsive-web-design/',
    ),
)

GARDENING_FALLBACK_RESOURCES: tuple[Resource, ...] = (
    Resource(
        type='article',
        title="RHS - Beginner's Guide to Gardening",
        url='https://www.rhs.org.uk/advice/beginners-guide/gardening',
    ),
    Resource(
        type='article',
        title='University of Minnesota Extension - Gardening Basics',
        url='https://extension.umn.edu/yard-and-garden/gardening-basics',
    ),
    Resource(
        type='article',
        title="Old Farmer's Almanac - Vegetable Gardening for Beginners",
        url='https://www.almanac.com/vegetable-gardening-for-beginners',
    ),
    Resource(
        type='article',
        title="Gardeners' World - How to Start Gardening",
        url='https://www.gardenersworld.com/how-to/grow-plants/how-to-start-gardening/',
    ),
)

FALLBACK_RESOURCE_BANK = MappingProxyType(
    {
        'technical': TECH_FALLBACK_RESOURCES,
        'gardening': GARDENING_FALLBACK_RESOURCES,
    }
)

ENCYCLOPEDIA_BASE_URL = 'https://en.wikipedia.org/wiki/'
