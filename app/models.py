from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

type ResourceType = Literal['article', 'video', 'book', 'course', 'other']
type TargetLevel = Literal['beginner', 'intermediate', 'advanced']
type NodeLevel = Literal['beginner', 'intermediate', 'advanced', 'mixed']

RESOURCE_TYPES: frozenset[str] = frozenset({'article', 'video', 'book', 'course', 'other'})
TARGET_LEVELS: frozenset[str] = frozenset({'beginner', 'intermediate', 'advanced'})


class Resource(BaseModel):
    """A single external link attached to a learning node."""

    model_config = ConfigDict(frozen=True)  # pyright: ignore[reportUnannotatedClassAttribute]

    type: ResourceType = 'article'
    title: str = Field(min_length=1)
    url: str = Field(description='Absolute http(s) URL of a free, openly accessible resource')


class LearningNode(BaseModel):
    """One unit of the learning map tree, optionally with nested children."""

    id: str
    title: str
    level: NodeLevel
    summary: str
    resources: list[Resource] = Field(default_factory=list, max_length=3)
    children: list['LearningNode'] = Field(default_factory=list)


class LearningMap(BaseModel):
    """
    Complete learning map returned to the client.

    The root container holding the requested topic and level, an overview of the
    path and the ordered tree of nodes.
    """

    topic: str
    targetLevel: TargetLevel  # noqa: N815
    overview: str
    nodes: list[LearningNode]


class GenerateMapRequest(BaseModel):
    """Body of ``POST /generate-map``; fields are untyped so bad values map to defaults."""

    topic: Any = None
    level: Any = None

    def resolved_topic(self) -> str:
        """Stripped topic, or an empty string when it is missing or not a string"""
        return self.topic.strip() if isinstance(self.topic, str) else ''

    def resolved_level(self) -> TargetLevel:
        """Unknown, missing or non-string levels fall back to beginner"""
        if isinstance(self.level, str) and self.level in TARGET_LEVELS:
            return self.level  # pyright: ignore[reportReturnType]
        return 'beginner'


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
