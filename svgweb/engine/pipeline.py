"""Pipeline orchestrator: runs the registered document stages in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from svgweb.engine.context import DocumentContext
from svgweb.engine.registry import StageRegistry, get_registry

logger = logging.getLogger(__name__)


class Pipeline:
    """Runs document stages against one DocumentContext."""

    def __init__(self, registry: StageRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: DocumentContext) -> DocumentContext:
        """Run every registered stage. A failing stage aborts the run for this document."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
            except Exception:
                # The orchestrator reports the failure for the file
                logger.debug("  %s failed", spec.id)
                raise
            ctx.completed_stages.append(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.debug(
            "Pipeline complete: %d stages in %.1fms %s",
            len(ctx.completed_stages),
            total,
            ctx.stats,
        )
        return ctx


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    package = importlib.import_module("svgweb.engine.stages")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")


def create_pipeline() -> Pipeline:
    """Factory for a pipeline over the built-in stages."""
    register_stages()
    return Pipeline()
