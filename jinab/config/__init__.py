"""Configuration constants for jinab (see `settings`)."""
