"""Stage registry: every document stage is a standalone function registered via decorator.

Usage:
    @stage(id="S2.editor_stripper", dependencies=["S1.color_normalizer"])
    def strip_editor_metadata(ctx: DocumentContext) -> None:
        ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svgweb.engine.context import DocumentContext

logger = logging.getLogger(__name__)


@dataclass
class StageSpec:
    id: str
    fn: Callable[["DocumentContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StageRegistry:
    """Registry of document stages, ordered by dependencies."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s", spec.id)

    def resolve_order(self) -> list[StageSpec]:
        """Topological sort respecting dependencies; ties keep registration order."""
        for spec in self._stages.values():
            unknown = [dep for dep in spec.dependencies if dep not in self._stages]
            if unknown:
                raise ValueError(f"Stage {spec.id} depends on unknown stages: {unknown}")

        # Kahn's algorithm
        in_degree = {sid: len(spec.dependencies) for sid, spec in self._stages.items()}
        queue = [sid for sid, d in in_degree.items() if d == 0]
        ordered: list[StageSpec] = []

        while queue:
            sid = queue.pop(0)
            ordered.append(self._stages[sid])
            for other_id, other_spec in self._stages.items():
                if sid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)

        if len(ordered) != len(self._stages):
            missing = set(self._stages) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a document stage."""

    def decorator(fn: Callable[["DocumentContext"], None]):
        spec = StageSpec(
            id=id,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
