"""Multistream destinations, their JSON storage, output-setting resolution and token files."""

__version__ = "0.4.1"

__all__ = [
    "config",
    "destination",
    "output_settings",
    "token_store",
]