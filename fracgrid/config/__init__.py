"""config: grid defaults loaded from YAML."""

from fracgrid.config.settings import Clearing, GridConfig, get_default_config, load_config

__all__ = ["Clearing", "GridConfig", "get_default_config", "load_config"]
