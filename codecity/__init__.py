"""codecity — code archaeology metrics from git history."""

__version__ = "0.1.0"
