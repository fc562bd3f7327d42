"""Graph-based sound synthesis: wire generator and operator components, render PCM samples."""

__version__ = "0.1.0"