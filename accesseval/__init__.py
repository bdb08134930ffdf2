"""Replay page-access traces against eviction strategies and tabulate reads and writes per RAM size."""

__version__ = "0.1.0"
__all__ = ["evaluator", "results", "trace"]