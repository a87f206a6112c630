"""Metric functions — each takes the parsed change records and returns a list of dataclass rows."""

# Lazy re-exports: a metric module is only imported when one of its
# functions is first requested.
from importlib import import_module as _im
from typing import Callable

# metric name -> (module, function, row type)
METRICS: dict[str, tuple[str, str, str]] = {
    "churn": ("churn", "get_churn", "ChurnRow"),
    "authors": ("authors", "get_authors", "EntityAuthors"),
    "code-age": ("age", "get_code_age", "CodeAge"),
    "coupling": ("coupling", "get_coupling", "Coupling"),
    "effort": ("authors", "get_effort", "EntityEffort"),
    "main-dev": ("main_dev", "get_main_dev", "MainDeveloper"),
    "revisions": ("revisions", "get_revisions", "Revisions"),
    "summary": ("revisions", "get_summary", "SummaryStat"),
    "entity-ownership": ("churn", "get_entity_ownership", "EntityOwnership"),
    "communication": ("coupling", "get_communication", "Communication"),
    "fractal-value": ("fractal", "get_fractal_value", "FractalValue"),
    "refactoring-main-dev": ("main_dev", "get_refactoring_main_dev", "RefactoringMainDeveloper"),
}


def get_metric(name: str) -> tuple[Callable, type]:
    """Return ``(function, row_type)`` for the metric called *name*."""
    try:
        mod_name, attr, row_type = METRICS[name]
    except KeyError:
        raise KeyError(f"Unknown metric {name!r}; expected one of: {', '.join(METRICS)}") from None
    mod = _im(f"codecity.analyzers.{mod_name}")
    models = _im("codecity.models")
    return getattr(mod, attr), getattr(models, row_type)


def __getattr__(name: str):  # noqa: N807
    for mod_name, attr, _ in METRICS.values():
        if attr == name:
            return getattr(_im(f"codecity.analyzers.{mod_name}"), attr)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "METRICS",
    "get_metric",
    "get_churn",
    "get_authors",
    "get_code_age",
    "get_coupling",
    "get_effort",
    "get_main_dev",
    "get_revisions",
    "get_summary",
    "get_entity_ownership",
    "get_communication",
    "get_fractal_value",
    "get_refactoring_main_dev",
]
