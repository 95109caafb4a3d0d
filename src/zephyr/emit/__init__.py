"""Rule emission: selectors, media wrappers and ordering keys."""

from zephyr.emit.emitter import RuleEmitter, class_selector, escape_class, variant_rank

__all__ = ["RuleEmitter", "class_selector", "escape_class", "variant_rank"]
