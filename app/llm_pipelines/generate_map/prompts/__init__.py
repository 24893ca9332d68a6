"""Prompts for learning map generation pipeline"""

import json
import pathlib

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from openai.types.chat import ChatCompletionMessageParam
from pydantic import BaseModel

here = pathlib.Path(__file__).parent.resolve()
jinja_env = Environment(loader=FileSystemLoader(str(here)), undefined=StrictUndefined)


def generate_map_prompt(
    *, topic: str, level: str, response_model: type[BaseModel]
) -> list[ChatCompletionMessageParam]:
    """Create prompt for learning map generation in OpenAI chat-completions format"""
    system_template = jinja_env.get_template('system.md.jinja')
    user_template = jinja_env.get_template('user.md.jinja')
    json_schema = json.dumps(response_model.model_json_schema(), indent=2)

    return [
        {'role': 'system', 'content': system_template.render(json_schema=json_schema)},
        {'role': 'user', 'content': user_template.render(topic=topic, level=level)},
    ]


__all__ = ['generate_map_prompt']
