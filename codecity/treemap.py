"""Shape merged code-city rows for a plotly treemap."""

from __future__ import annotations

import posixpath
from pathlib import Path
from typing import Sequence

import pandas as pd

from codecity.models import MergedFile

ROOT_DIRECTORY = "."


def read_city_csv(path: str | Path, encoding: str = "utf-8") -> list[MergedFile]:
    """Read a ``filePath,revisions,lines`` CSV written by ``codecity city``."""
    df = pd.read_csv(path, encoding=encoding, dtype={"filePath": str})
    if df.empty:
        return []
    revisions = pd.to_numeric(df["revisions"], errors="coerce").fillna(0).astype(int)
    lines = pd.to_numeric(df["lines"], errors="coerce").fillna(0).astype(int)
    return [
        MergedFile(file_path=p, revisions=int(r), lines=int(n))
        for p, r, n in zip(df["filePath"].fillna(""), revisions, lines)
    ]


def build_treemap_frame(files: Sequence[MergedFile]) -> pd.DataFrame:
    """Return one row per file with its parent directory and base name.

    Files at the top level are grouped under :data:`ROOT_DIRECTORY`.
    """
    columns = ["directory", "name", "file_path", "lines", "revisions"]
    rows = [
        {
            "directory": posixpath.dirname(f.file_path) or ROOT_DIRECTORY,
            "name": posixpath.basename(f.file_path) or f.file_path,
            "file_path": f.file_path,
            "lines": f.lines,
            "revisions": f.revisions,
        }
        for f in files
    ]
    return pd.DataFrame(rows, columns=columns)


def revision_color(revisions: int, max_revisions: int) -> str:
    """Return an HSL colour running from blue (rarely changed) to red (hot spot)."""
    intensity = min(revisions / max_revisions, 1) if max_revisions > 0 else 0
    hue = 200 + intensity * 160
    saturation = 70 + intensity * 30
    lightness = 50 + intensity * 20
    return f"hsl({hue:g}, {saturation:g}%, {lightness:g}%)"
