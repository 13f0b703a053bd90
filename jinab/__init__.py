"""jinab: read and search the web from the terminal with Jina AI's Reader API."""

__all__ = ["__version__"]

__version__ = "0.1.0"
