"""Shared dataclasses for parsed change records and all analyzer outputs."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Sequence

import pandas as pd

# Column names used by the original CSV reports and the treemap front end.
CSV_COLUMN_NAMES = {
    "main_dev": "main-dev",
    "fractal_value": "fractal-value",
    "file_path": "filePath",
}


def to_json(data: Any, indent: int = 2) -> str:
    if isinstance(data, list):
        serializable = [asdict(item) if hasattr(item, "__dataclass_fields__") else item for item in data]
    elif hasattr(data, "__dataclass_fields__"):
        serializable = asdict(data)
    else:
        serializable = data
    return json.dumps(serializable, indent=indent, ensure_ascii=False)


def to_frame(rows: Sequence[Any], row_type: type | None = None) -> pd.DataFrame:
    """Return *rows* (dataclass instances) as a DataFrame with CSV column names.

    *row_type* fixes the header when *rows* is empty, so an empty result still
    produces a header-only table.
    """
    if rows:
        frame = pd.DataFrame([asdict(row) for row in rows])
    elif row_type is not None:
        frame = pd.DataFrame(columns=[f.name for f in fields(row_type)])
    else:
        frame = pd.DataFrame()
    return frame.rename(columns=CSV_COLUMN_NAMES)


def to_csv(rows: Sequence[Any], row_type: type | None = None) -> str:
    return to_frame(rows, row_type).to_csv(index=False)


def write_csv(
    rows: Sequence[Any],
    path: str | Path,
    row_type: type | None = None,
    encoding: str = "utf-8",
) -> Path:
    """Write *rows* as CSV to *path*, creating parent directories as needed."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    to_frame(rows, row_type).to_csv(target, index=False, encoding=encoding)
    return target


@dataclass(frozen=True)
class ChangeRecord:
    entity: str
    date: str  # YYYY-MM-DD, compares correctly as a string
    author: str
    rev: str
    loc_added: int
    loc_deleted: int


@dataclass
class ChurnRow:
    entity: str
    added: int
    deleted: int
    commits: int


@dataclass
class EntityAuthors:
    entity: str
    author: str
    commits: int


@dataclass
class CodeAge:
    entity: str
    date: str  # latest date the entity was touched


@dataclass
class Revisions:
    entity: str
    n_revs: int


@dataclass
class SummaryStat:
    statistic: str
    value: int


@dataclass
class EntityOwnership:
    entity: str
    author: str
    added: int
    deleted: int


@dataclass
class EntityEffort:
    entity: str
    author: str
    author_revs: int
    total_revs: int


@dataclass
class MainDeveloper:
    entity: str
    main_dev: str
    added: int
    total_added: int
    ownership: float  # percentage, 2 decimals


@dataclass
class RefactoringMainDeveloper:
    entity: str
    main_dev: str
    removed: int
    total_removed: int
    ownership: float


@dataclass
class Coupling:
    entity: str
    coupled: str
    degree: int  # shared_revs relative to the average, in percent
    average_revs: int
    shared_revs: int


@dataclass
class Communication:
    author: str
    peer: str
    shared: int
    average: int
    strength: int


@dataclass
class FractalValue:
    entity: str
    fractal_value: float
    total_revs: int


@dataclass
class MergedFile:
    file_path: str
    revisions: int
    lines: int
