from .loader import DEFAULT_CONFIG_TEMPLATE, load_config
from .models import DagEditConfig, EditorConfig, StoreConfig

__all__ = [
    "DEFAULT_CONFIG_TEMPLATE",
    "DagEditConfig",
    "EditorConfig",
    "StoreConfig",
    "load_config",
]
