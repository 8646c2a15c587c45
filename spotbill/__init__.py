from . import (
    canon,
    exceptions,
    types,
    utils,
    tariffs,
    config,
    ingest,
    transform,
    pricing,
    formats,
    summary,
    engine,
)

__all__ = [
    "canon",
    "exceptions",
    "types",
    "utils",
    "tariffs",
    "config",
    "ingest",
    "transform",
    "pricing",
    "formats",
    "summary",
    "engine",
]
