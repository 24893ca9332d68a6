from typing import Any

from .resources import ResourceListValidator


def node_context(topic_text: str, node: dict[str, Any]) -> str:
    """Relevance context of a node: the root topic followed by the node title"""
    return f'{topic_text} {node.get("title") or ""}'


class TreeSanitizer:
    """
    Repairs the resource lists of a generated node tree.

    The walk is depth-first and sequential: a node's resources are validated
    before its children are visited, siblings in document order. Children are
    validated against the root topic, not their parent's context. The tree shape
    is preserved exactly and every other field of a node is carried through
    as the model emitted it.
    """

    def __init__(self, validator: ResourceListValidator):
        self._validator: ResourceListValidator = validator

    async def sanitize(self, nodes: Any, topic_text: str) -> list[dict[str, Any]]:
        safe_nodes = []
        for node in nodes if isinstance(nodes, list) else ():
            fields = node if isinstance(node, dict) else {}
            resources = await self._validator.validate(
                fields.get('resources'), node_context(topic_text, fields)
            )
            children = await self.sanitize(fields.get('children') or [], topic_text)
            safe_nodes.append(
                {
                    **fields,
                    'resources': [r.model_dump() for r in resources],
                    'children': children,
                }
            )
        return safe_nodes
