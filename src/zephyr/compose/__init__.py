"""Batch-scoped composition of classes that only make sense together."""

from zephyr.compose.gradient import CompositionContext, GradientContext

__all__ = ["CompositionContext", "GradientContext"]
