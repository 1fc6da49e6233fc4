"""Document stage engine."""

from svgweb.engine.context import DocumentContext, FileRecord
from svgweb.engine.pipeline import Pipeline, create_pipeline
from svgweb.engine.registry import get_registry, stage

__all__ = [
    "stage",
    "get_registry",
    "DocumentContext",
    "FileRecord",
    "Pipeline",
    "create_pipeline",
]
