from .app import main
from .config import Settings, load_settings

__all__ = ["main", "Settings", "load_settings"]
