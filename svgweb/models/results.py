"""Per-file and per-run outcome models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class FileResult(BaseModel):
    """Outcome of processing one input file."""

    input_path: str
    output_path: str
    status: Literal["ok", "error"]
    error_type: str = ""
    error: str = ""
    elapsed_ms: float = 0.0


class BatchReport(BaseModel):
    """Outcome of a whole run, in processing order."""

    output_dir: str
    results: list[FileResult] = Field(default_factory=list)

    @property
    def succeeded(self) -> list[FileResult]:
        return [r for r in self.results if r.status == "ok"]

    @property
    def failed(self) -> list[FileResult]:
        return [r for r in self.results if r.status == "error"]
