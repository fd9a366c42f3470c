"""Fixed-capacity vector and sorted map, with sequence algorithms and a demo command."""

__version__ = "0.1.0"

__all__ = ["algorithm", "demo", "errors", "fixed_map", "vector"]