"""Core domain primitives for domain-kernel.

Value objects, identifiers, entities, aggregate roots and domain events,
plus the exceptions and capability protocols they share.
"""
