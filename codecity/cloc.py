"""Run cloc and read its per-file JSON report into a path -> code-lines map."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path

from codecity.config import AnalysisConfig

logger = logging.getLogger(__name__)

# Entries in a ``cloc --by-file --json`` report that are not files
CLOC_RESERVED_KEYS = ("header", "SUM")


class ClocError(RuntimeError):
    """cloc could not be run or its report could not be read."""


def build_cloc_command(config: AnalysisConfig) -> list[str]:
    cmd = [config.cloc_command, "./", "--by-file", "--json"]
    if config.cloc_exclude_dirs:
        cmd.append(f"--exclude-dir={','.join(config.cloc_exclude_dirs)}")
    return cmd


def parse_cloc_report(text: str) -> dict[str, int]:
    """Return the ``code`` line count of every file in a cloc JSON report."""
    try:
        report = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ClocError(f"cloc output is not valid JSON: {exc}") from exc
    if not isinstance(report, dict):
        raise ClocError("cloc output is not a JSON object")

    counts: dict[str, int] = {}
    for path, entry in report.items():
        if path in CLOC_RESERVED_KEYS:
            continue
        counts[path] = int(entry.get("code", 0))
    return counts


def read_cloc_file(path: str | Path, encoding: str = "utf-8") -> dict[str, int]:
    return parse_cloc_report(Path(path).read_text(encoding=encoding))


def run_cloc(path: str | Path, config: AnalysisConfig | None = None) -> dict[str, int]:
    """Count code lines per file below *path*.

    Raises :class:`ClocError` when cloc is missing, times out or exits
    non-zero.
    """
    config = config or AnalysisConfig()
    cmd = build_cloc_command(config)
    logger.debug("Running %s in %s", " ".join(cmd), path)
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(path),
            capture_output=True,
            text=True,
            encoding="utf-8",
            timeout=config.timeout_s,
        )
    except FileNotFoundError as exc:
        raise ClocError(f"cloc executable not found: {config.cloc_command}") from exc
    except subprocess.TimeoutExpired as exc:
        raise ClocError(f"cloc timed out after {config.timeout_s}s") from exc
    if proc.returncode != 0:
        raise ClocError(f"cloc exited with code {proc.returncode}: {proc.stderr.strip()}")
    return parse_cloc_report(proc.stdout)
