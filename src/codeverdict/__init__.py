"""codeverdict: heuristic AI-authorship scoring for source code."""

__version__ = "0.1.0"
