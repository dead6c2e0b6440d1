"""Configuration module for loading and accessing harness settings."""

from apiharness.exceptions import ConfigurationError

from .loader import Config

__all__ = ["Config", "ConfigurationError"]
