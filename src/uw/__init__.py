"""uw workspace command dispatcher."""

__version__ = "0.1.0"

from .config import load_config, load_config_model
from .core import find_root
from .registry import default_registry

__all__ = [
    "load_config",
    "load_config_model",
    "find_root",
    "default_registry",
]
