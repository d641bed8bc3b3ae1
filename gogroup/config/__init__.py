from .load import find_go_module, load_settings, read_module_path, resolve_settings
from .model import Settings
from .paths import SETTINGS_FILE, find_settings_file

__all__ = [
    "Settings",
    "SETTINGS_FILE",
    "find_settings_file",
    "find_go_module",
    "load_settings",
    "read_module_path",
    "resolve_settings",
]
