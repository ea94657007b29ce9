"""
Configuration layer: global.json model and loader.
"""

from .model import ColumnMapping, GlobalConfig
from .loader import load_global_config

__all__ = ["ColumnMapping", "GlobalConfig", "load_global_config"]
