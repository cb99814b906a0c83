"""Base classes for pluggable components."""

from modannounce.base.notifier import BaseNotifier

__all__ = ["BaseNotifier"]
