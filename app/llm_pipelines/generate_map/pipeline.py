import json
import logging
from typing import Any

from openai import AsyncOpenAI

from app.errors import (
    InvalidModelOutputError,
    LearningMapError,
    MissingNodesError,
    UpstreamModelError,
)
from app.llm_pipelines.generate_map.prompts import generate_map_prompt
from app.models import LearningMap, TargetLevel
from app.resource_validation import TreeSanitizer

logger = logging.getLogger(__name__)

GENERATION_FAILED = 'Failed to generate learning map with the language model.'


def parse_map_response(text: str) -> dict[str, Any]:
    """
    Parse raw model output into a map document with a ``nodes`` array.

    Raises
    ------
    InvalidModelOutputError
        If the text is not valid JSON.
    MissingNodesError
        If the JSON has no ``nodes`` list.
    """
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error('Failed to parse JSON from model: %s\n%s', e, text)
        raise InvalidModelOutputError(
            'The language model returned invalid JSON. Please try again.'
        ) from e

    if not isinstance(parsed, dict) or not isinstance(parsed.get('nodes'), list):
        logger.error('Model output has no nodes[] array: %s', text)
        raise MissingNodesError('Invalid structure: missing nodes[] in response.')

    return parsed


def default_overview(topic: str, level: str) -> str:
    return f'A curated learning path to master {topic} at a {level} level.'


class GenerateMapPipeline:
    """
    LLM pipeline producing a sanitized learning map for a topic.

    Makes a single JSON-mode completion call, treats the answer as untrusted,
    parses it once and hands the node tree to the resource sanitizer. There is
    no retry against the model.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str,
        sanitizer: TreeSanitizer,
        temperature: float = 0.7,
    ):
        self._client: AsyncOpenAI = client
        self._model: str = model
        self._sanitizer: TreeSanitizer = sanitizer
        self._temperature: float = temperature

    async def _complete(self, topic: str, level: TargetLevel) -> str:
        messages = generate_map_prompt(topic=topic, level=level, response_model=LearningMap)
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=messages,
            temperature=self._temperature,
            response_format={'type': 'json_object'},
        )
        if not response.choices:
            raise UpstreamModelError(
                GENERATION_FAILED, details='The language model returned no choices.'
            )

        return response.choices[0].message.content or '{}'

    async def generate(self, topic: str, level: TargetLevel = 'beginner') -> dict[str, Any]:
        """
        Generate and sanitize a learning map.

        Parameters
        ----------
        topic : str
            Free-text learning topic
        level : TargetLevel, default='beginner'
            Target proficiency of the learner

        Returns
        -------
        dict
            Document shaped like ``LearningMap``; node fields other than
            ``resources`` and ``children`` are passed through as generated
        """
        try:
            text = await self._complete(topic, level)
            parsed = parse_map_response(text)
            nodes = await self._sanitizer.sanitize(parsed['nodes'], topic)
        except LearningMapError:
            raise
        except Exception as e:
            logger.exception('Learning map generation failed for %r', topic)
            raise UpstreamModelError(GENERATION_FAILED, details=str(e)) from e

        logger.info('Generated learning map for %r with %d top-level nodes', topic, len(nodes))

        return {
            'topic': parsed.get('topic') or topic,
            'targetLevel': parsed.get('targetLevel') or level,
            'overview': parsed.get('overview') or default_overview(topic, level),
            'nodes': nodes,
        }
