"""Entities module for domain-kernel."""

from .entity import Entity
from .aggregate_root import AggregateRoot

__all__ = [
    "Entity",
    "AggregateRoot",
]
