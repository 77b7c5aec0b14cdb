"""Neural layers with back-propagation, error functions, a threshold wrapper, an LRU cache and a listener registry."""

__version__ = "0.1.0"

__all__ = ["bp_layer", "errors", "layer", "lru_cache", "observable", "threshold"]