"""Memory managers, abstract sequences and networks, implicit and explicit
hierarchies, and helpers to filter and sort territorial units."""

__version__ = "0.1.0"
__all__ = ["explicit_hierarchy", "filters", "hierarchy", "memory", "sequence", "sorting"]