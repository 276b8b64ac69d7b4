"""Configuration management package.

This package provides functionality for loading and managing generator and
renderer configuration from YAML files.
"""

from sketchcity.config.config_loader import Config

__all__ = ['Config']
