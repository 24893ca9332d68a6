import pytest

from app.resource_validation.data import GARDENING_FALLBACK_RESOURCES
from app.resource_validation.tree import node_context


def count_nodes(nodes) -> int:
    return sum(1 + count_nodes(node['children']) for node in nodes)


def depth(nodes) -> int:
    return max((1 + depth(node['children']) for node in nodes), default=0)


def test_node_context_appends_title():
    assert node_context('gardening', {'title': 'Soil'}) == 'gardening Soil'
    assert node_context('gardening', {}) == 'gardening '


@pytest.mark.asyncio
async def test_tree_shape_and_fields_are_preserved(sanitizer):
    nodes = [
        {
            'id': '1',
            'title': 'Soil Basics',
            'level': 'beginner',
            'summary': 'Know your soil.',
            'estimatedHours': 3,
            'resources': [{'url': 'https://udemy.com/course/soil', 'title': 'Paid soil'}],
            'children': [
                {
                    'id': '1.1',
                    'title': 'Composting',
                    'level': 'beginner',
                    'summary': 'Make compost.',
                    'resources': [],
                    'children': [{'id': '1.1.1', 'title': 'Worms'}],
                }
            ],
        },
        {'id': '2', 'title': 'Planting', 'level': 'mixed', 'summary': 'Sow seeds.'},
    ]

    safe = await sanitizer.sanitize(nodes, 'gardening')

    assert count_nodes(safe) == 4
    assert depth(safe) == 3
    assert [n['id'] for n in safe] == ['1', '2']
    assert safe[0]['estimatedHours'] == 3
    assert safe[0]['summary'] == 'Know your soil.'
    assert safe[0]['children'][0]['children'][0]['id'] == '1.1.1'
    assert safe[0]['children'][0]['children'][0]['children'] == []
    assert safe[1]['children'] == []
    expected = [r.model_dump() for r in GARDENING_FALLBACK_RESOURCES[:3]]
    assert safe[0]['resources'] == expected
    assert safe[0]['children'][0]['resources'] == expected


@pytest.mark.asyncio
async def test_input_tree_is_not_mutated(sanitizer):
    node = {'id': '1', 'title': 'Pots', 'resources': [{'url': 'https://example.org/', 'title': 'x'}]}
    await sanitizer.sanitize([node], 'pottery')
    assert node == {
        'id': '1',
        'title': 'Pots',
        'resources': [{'url': 'https://example.org/', 'title': 'x'}],
    }


@pytest.mark.asyncio
async def test_node_context_is_used_for_each_node(sanitizer):
    nodes = [{'id': 'a', 'title': 'Wheel Throwing', 'children': [{'id': 'b', 'title': 'Glazes'}]}]
    safe = await sanitizer.sanitize(nodes, 'pottery')
    assert safe[0]['resources'][0]['url'] == 'https://en.wikipedia.org/wiki/pottery_Wheel_Throwing'
    # children are evaluated against the root topic plus their own title
    assert safe[0]['children'][0]['resources'][0]['url'] == 'https://en.wikipedia.org/wiki/pottery_Glazes'


@pytest.mark.asyncio
async def test_malformed_nodes_are_kept(sanitizer):
    safe = await sanitizer.sanitize(['not a node', {'title': 'Pots', 'children': 'oops'}], 'pottery')
    assert len(safe) == 2
    assert safe[0]['children'] == []
    assert safe[0]['resources'][0]['url'] == 'https://en.wikipedia.org/wiki/pottery'
    assert safe[1]['children'] == []


@pytest.mark.asyncio
async def test_non_list_input_yields_no_nodes(sanitizer):
    assert await sanitizer.sanitize(None, 'pottery') == []


@pytest.mark.asyncio
async def test_resources_are_probed_sequentially_in_document_order(sanitizer, probe):
    nodes = [
        {
            'id': '1',
            'title': 'Clay',
            'resources': [{'url': 'https://example.org/1', 'title': 'one'}],
            'children': [
                {'id': '1.1', 'resources': [{'url': 'https://example.org/2', 'title': 'two'}]}
            ],
        },
        {'id': '2', 'resources': [{'url': 'https://example.org/3', 'title': 'three'}]},
    ]
    await sanitizer.sanitize(nodes, 'pottery')
    assert probe.calls == ['https://example.org/1', 'https://example.org/2', 'https://example.org/3']
