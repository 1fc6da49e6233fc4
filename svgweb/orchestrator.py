"""File orchestrator: discover inputs, then run each file through the pipeline on its own.

Per-file failures are logged and skipped. Only a missing output directory
that cannot be created stops the run.
"""

from __future__ import annotations

import logging
import os
import tempfile
import time
from collections.abc import Sequence
from pathlib import Path

from svgweb.config import DEFAULT_CONFIG, OptimizerConfig
from svgweb.engine.context import DocumentContext, FileRecord
from svgweb.engine.pipeline import Pipeline, create_pipeline
from svgweb.errors import OptimizerError, OutputDirError, ReadError, WriteError
from svgweb.minify.base import Minifier, default_minifier, minify
from svgweb.models.results import BatchReport, FileResult
from svgweb.svg.document import parse_document, serialize_document

logger = logging.getLogger(__name__)


def discover_inputs(
    args: Sequence[str],
    cwd: Path,
    config: OptimizerConfig = DEFAULT_CONFIG,
) -> list[Path]:
    """Explicit paths win (any extension, relative to cwd); otherwise glob cwd."""
    if args:
        return [cwd / arg for arg in args]
    return sorted(p for p in cwd.glob(config.discovery_pattern) if p.is_file())


def ensure_output_dir(path: Path) -> Path:
    """Create the output directory if needed. Idempotent."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirError(f"Cannot create output directory: {e.strerror or e}", path) from e
    return path


def read_text(path: Path, encoding: str = "utf-8") -> str:
    try:
        return path.read_text(encoding=encoding)
    except OSError as e:
        raise ReadError(f"Cannot read file: {e.strerror or e}", path) from e
    except UnicodeDecodeError as e:
        raise ReadError(f"Not valid {encoding}: {e.reason}", path) from e


def write_text(path: Path, text: str, encoding: str = "utf-8") -> None:
    """Write through a temp file in the target directory so a failure leaves nothing behind."""
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            f.write(text)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteError(f"Cannot write file: {e.strerror or e}", path) from e


def optimize_text(
    text: str,
    pipeline: Pipeline,
    minifier: Minifier,
    record: FileRecord | None = None,
    config: OptimizerConfig = DEFAULT_CONFIG,
) -> str:
    """Parse, run the document stages, serialize and minify one SVG."""
    path = record.input_path if record else None
    ctx = DocumentContext(root=parse_document(text, path), record=record, config=config)
    pipeline.run(ctx)
    return minify(serialize_document(ctx.root), minifier, path)


def process_file(
    record: FileRecord,
    pipeline: Pipeline,
    minifier: Minifier,
    config: OptimizerConfig = DEFAULT_CONFIG,
) -> FileResult:
    """Run one file end to end. Per-file errors are logged and returned, never raised."""
    start = time.perf_counter()
    try:
        text = read_text(record.input_path, config.encoding)
        out = optimize_text(text, pipeline, minifier, record, config)
        write_text(record.output_path, out, config.encoding)
    except Exception as e:
        # OptimizerError is the expected case; anything else is still confined to this file
        logger.error('Error processing "%s": %s', record.input_path, e)
        if not isinstance(e, OptimizerError):
            logger.debug("Unexpected failure", exc_info=True)
        return FileResult(
            input_path=str(record.input_path),
            output_path=str(record.output_path),
            status="error",
            error_type=type(e).__name__,
            error=str(e),
        )

    elapsed = round((time.perf_counter() - start) * 1000, 1)
    logger.debug("  wrote %s in %.1fms", record.output_path, elapsed)
    return FileResult(
        input_path=str(record.input_path),
        output_path=str(record.output_path),
        status="ok",
        elapsed_ms=elapsed,
    )


def run(
    args: Sequence[str] = (),
    cwd: Path | None = None,
    minifier: Minifier | None = None,
    config: OptimizerConfig = DEFAULT_CONFIG,
) -> BatchReport:
    """Process every input in order. Raises OutputDirError if setup fails."""
    cwd = cwd or Path.cwd()
    output_dir = (cwd / config.output_dir_name).resolve()
    inputs = discover_inputs(args, cwd, config)

    ensure_output_dir(output_dir)

    logger.info("Processing SVGs from: %s", cwd)
    logger.info("Output to: %s", output_dir)
    logger.info("Files found: %s", [str(p) for p in inputs])

    pipeline = create_pipeline()
    minifier = minifier or default_minifier()
    report = BatchReport(output_dir=str(output_dir))

    for input_path in inputs:
        record = FileRecord.for_input(input_path, output_dir)
        logger.info("Processing: %s", input_path.name)
        report.results.append(process_file(record, pipeline, minifier, config))

    logger.info(
        "Optimization complete! %d written, %d failed. Files saved to: %s",
        len(report.succeeded),
        len(report.failed),
        output_dir,
    )
    return report
