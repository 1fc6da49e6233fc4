"""DocumentContext: the mutable state one file's document carries through the stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from lxml import etree

from svgweb.config import DEFAULT_CONFIG, OptimizerConfig


@dataclass(frozen=True)
class FileRecord:
    """One input file and where its result goes. Records share no state."""

    input_path: Path
    output_path: Path

    @classmethod
    def for_input(cls, input_path: Path, output_dir: Path) -> FileRecord:
        # Only the basename survives; inputs sharing a basename overwrite each other
        return cls(input_path=input_path, output_path=output_dir / input_path.name)


@dataclass
class DocumentContext:
    """Owned exclusively by one file's processing; discarded after serialization."""

    root: etree._Element
    record: FileRecord | None = None
    config: OptimizerConfig = DEFAULT_CONFIG
    completed_stages: list[str] = field(default_factory=list)
    # Simple per-stage counters, e.g. {"fills_rewritten": 3}
    stats: dict[str, int] = field(default_factory=dict)

    def bump(self, key: str, amount: int = 1) -> None:
        self.stats[key] = self.stats.get(key, 0) + amount
