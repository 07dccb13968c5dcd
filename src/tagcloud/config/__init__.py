"""YAML configuration for cloud runs."""

from .loader import CloudConfig, ConfigLoader, RandomSizes, RenderOptions

__all__ = ["CloudConfig", "ConfigLoader", "RandomSizes", "RenderOptions"]
