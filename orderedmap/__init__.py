"""
Insertion-order preserving mapping.

The package provides `OrderedMap` (see `orderedmap.ordered_map`), a mapping
that combines the lookup performance of a ``dict`` with a deterministic
iteration order that is defined by the order in which keys were first inserted.
"""

from orderedmap.ordered_map import OrderedMap

__all__ = ["OrderedMap"]
