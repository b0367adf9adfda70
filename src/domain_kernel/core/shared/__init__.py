"""Shared protocols for domain-kernel."""

from .domain import Equatable, EventSource

__all__ = [
    "Equatable",
    "EventSource",
]
