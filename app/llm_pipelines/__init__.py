"""LLM pipelines for learning map generation"""

from .generate_map.pipeline import GenerateMapPipeline

__all__ = ['GenerateMapPipeline']
