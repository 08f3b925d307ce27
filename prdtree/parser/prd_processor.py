"""
PRD Processor - Main entry point for compiling PRD documents.

Runs raw PRD text through the pipeline:
1. Section detection
2. Entity extraction per section
3. Task tree assembly
4. Statistics aggregation

``process`` is total over its input: empty or missing text yields an
empty report, never an exception.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .models import ProcessingReport
from .section_detector import detect_sections
from .extractors.entity_extractor import annotate_sections
from .task_tree import build_task_tree
from .stats import aggregate_stats
from ..core.config import InputConfig
from ..utils.logger import get_logger, LogContext

logger = get_logger(__name__)


def process(
    raw_text: Optional[str],
    id_factory: Optional[Callable[[], str]] = None,
) -> ProcessingReport:
    """
    Compile PRD text into a task tree report.

    Args:
        raw_text: Raw PRD text. None and non-string values count as empty.
        id_factory: Optional zero-argument callable producing section IDs

    Returns:
        ProcessingReport with sections, task tree and statistics
    """
    started_at = datetime.now()
    if not isinstance(raw_text, str):
        raw_text = None

    with LogContext(logger, "Processing PRD", level=logging.DEBUG,
                    input_size=len(raw_text) if raw_text else 0):
        sections = annotate_sections(detect_sections(raw_text, id_factory=id_factory))
        task_tree = build_task_tree(sections)
        stats = aggregate_stats(task_tree, raw_text, started_at=started_at)

    report = ProcessingReport.from_stats(sections, task_tree, stats)

    if report.is_empty:
        logger.debug("No headings found; returning empty report")
    else:
        logger.debug(
            f"Processed PRD: {report.total_tasks} tasks, "
            f"{report.root_count} roots, levels={report.level_distribution}"
        )

    return report


def read_prd_file(file_path: str | Path, config: Optional[InputConfig] = None) -> str:
    """
    Read a PRD text file, enforcing input limits.

    Args:
        file_path: Path to PRD file
        config: Input settings (size limit, encoding)

    Returns:
        Decoded file content

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is too large, binary, or not decodable
    """
    config = config or InputConfig()
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"PRD file not found: {file_path}")

    size = path.stat().st_size
    if size > config.max_size_bytes:
        raise ValueError(
            f"PRD file too large: {size} bytes (limit {config.max_size_bytes})"
        )

    data = path.read_bytes()
    if b"\x00" in data:
        raise ValueError(f"PRD file looks binary, only text is supported: {file_path}")

    try:
        return data.decode(config.encoding)
    except UnicodeDecodeError as e:
        raise ValueError(f"PRD file is not valid {config.encoding}: {e}") from e


def process_file(
    file_path: str | Path,
    config: Optional[InputConfig] = None,
) -> ProcessingReport:
    """
    Read and compile a PRD file.

    Args:
        file_path: Path to PRD file
        config: Input settings

    Returns:
        ProcessingReport
    """
    content = read_prd_file(file_path, config)
    logger.debug(f"Read {len(content)} chars from {file_path}")
    return process(content)
