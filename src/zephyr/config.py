from __future__ import annotations

from dataclasses import dataclass

from zephyr.errors import ConfigurationError

DARK_MODES = ("class", "media")


@dataclass(frozen=True)
class ZephyrConfig:
    dark_mode: str = "class"  # "class" -> ancestor selector, "media" -> prefers-color-scheme
    dark_selector: str = ".dark"
    light_selector: str = ".light"
    important: bool = False  # mark every declaration !important
    cache_size: int = 1024  # 0 disables the resolution cache
    cache_shards: int = 8
    host: str = "127.0.0.1"
    port: int = 5000

    def __post_init__(self) -> None:
        if self.dark_mode not in DARK_MODES:
            raise ConfigurationError(
                f"dark_mode must be one of {DARK_MODES}, got {self.dark_mode!r}"
            )
        if self.cache_size < 0:
            raise ConfigurationError("cache_size must be >= 0")
        if self.cache_shards < 1:
            raise ConfigurationError("cache_shards must be >= 1")
