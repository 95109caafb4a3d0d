from zephyr.theme.loader import load_theme, theme_from_dict
from zephyr.theme.model import Theme, default_theme

__all__ = ["Theme", "default_theme", "load_theme", "theme_from_dict"]
