"""Stylesheet assembly and the resolution cache."""

from zephyr.assemble.assembler import StylesheetAssembler, assemble
from zephyr.assemble.cache import ResolutionCache

__all__ = ["StylesheetAssembler", "assemble", "ResolutionCache"]
