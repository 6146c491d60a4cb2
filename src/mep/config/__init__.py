"""Configuration utilities for mep-genome."""
from .schema import ConfigSchema, load_config

__all__ = ["ConfigSchema", "load_config"]
