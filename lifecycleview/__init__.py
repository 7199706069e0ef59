"""LifecycleView - interactive component lifecycle diagram."""

__version__ = "0.1.0"
