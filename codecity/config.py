"""Runtime settings for the external collaborators and report output."""

from __future__ import annotations

import dataclasses
import os
from typing import Mapping


@dataclasses.dataclass(frozen=True)
class AnalysisConfig:
    cloc_command: str = "cloc"
    cloc_exclude_dirs: tuple[str, ...] = ("node_modules",)
    encoding: str = "utf-8"
    timeout_s: int = 300

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AnalysisConfig":
        """Build a config from ``CODECITY_*`` environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        exclude = env.get("CODECITY_EXCLUDE_DIRS")
        timeout = env.get("CODECITY_TIMEOUT", "").strip()
        try:
            timeout_s = int(timeout) if timeout else defaults.timeout_s
        except ValueError:
            raise ValueError(f"CODECITY_TIMEOUT must be an integer, got {timeout!r}") from None
        return cls(
            cloc_command=env.get("CODECITY_CLOC") or defaults.cloc_command,
            cloc_exclude_dirs=(
                tuple(d.strip() for d in exclude.split(",") if d.strip())
                if exclude is not None
                else defaults.cloc_exclude_dirs
            ),
            encoding=env.get("CODECITY_ENCODING") or defaults.encoding,
            timeout_s=timeout_s,
        )
