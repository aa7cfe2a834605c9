"""In-memory inventory tracker with flat-file persistence and a text menu."""

__version__ = "0.1.0"
