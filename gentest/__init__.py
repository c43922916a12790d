"""Unit-test runtime building blocks: test metadata, naming, options, contexts, benchmarks and reports."""

__version__ = "1.0.0"

__all__ = [
    "attr_rules",
    "bench",
    "case",
    "model",
    "naming",
    "options",
    "reports",
    "text",
]