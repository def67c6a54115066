"""Configuration layer: opt-in structlog output for the ``quasigroup`` loggers.

The package has no config files or environment variables. Nothing here
touches the root logger or the global structlog configuration.
"""
