"""
Provides a mapping that preserves the insertion order of its keys.

`OrderedMap` keeps two structures in sync: a lookup index (a ``dict`` that is
only used for finding the value for a key) and an order list (a ``list`` that
contains each key exactly once, in the order in which the keys were first
inserted). Lookup is as fast as with a regular ``dict``, while iteration always
happens in insertion order.

Updating the value for a key that is already present does not change the
position of that key. The only way to change the order of existing keys is
calling `OrderedMap.sort_keys`::

    m = OrderedMap()
    m["b"] = 1
    m["a"] = 2
    m["c"] = 3
    m["a"] = 9
    m.keys()        # ("b", "a", "c")
    m.remove("b")
    str(m)          # '"a" : "9", "c" : "3"'

When an `OrderedMap` is created from another mapping, the keys are taken in
the order in which that mapping enumerates them. For a mapping that does not
have a meaningful order, the resulting order is meaningful neither.

Instances are not thread-safe. If they are shared between threads, access has
to be protected by a lock.
"""

import functools
import operator
import typing

KeyT = typing.TypeVar("KeyT")
ValueT = typing.TypeVar("ValueT")

# Sentinel that is distinguishable from None, which is a legitimate value.
_MISSING = object()


def _check_capacity(capacity: int) -> None:
    # Python's dict does not support reserving storage, so the hint is only
    # validated. operator.index raises a TypeError for non-integers.
    if operator.index(capacity) < 0:
        raise ValueError("Capacity hint must not be negative.")


class OrderedMap(typing.MutableMapping[KeyT, ValueT]):
    """
    Mapping that iterates over its keys in the order in which they were first
    inserted.

    All insertions and updates go through `set` and all removals go through
    `remove`. The subscript operators and the methods inherited from
    ``MutableMapping`` (``update``, ``setdefault``, ``pop``, ``popitem``) are
    thin wrappers around these two methods.
    """

    def __init__(
            self,
            source: typing.Union[
                typing.Mapping[KeyT, ValueT],
                typing.Iterable[typing.Tuple[KeyT, ValueT]],
                None] = None,
            *,
            minimum_capacity: int = 0):
        """
        Create an ordered map.

        :param source:
            optional source of initial entries. If this is another
            `OrderedMap`, an independent copy of it is created. If it is any
            other mapping, its entries are inserted in the order in which the
            mapping enumerates its keys. Otherwise, it has to be an iterable of
            ``(key, value)`` pairs, which are inserted in iteration order.
        :param minimum_capacity:
            number of entries for which storage should be reserved. This is
            purely a hint and has no effect on the content of the map. It must
            not be negative.
        """
        _check_capacity(minimum_capacity)
        self._index = {}
        self._order = []
        if source is None:
            return
        if isinstance(source, OrderedMap):
            self._index = dict(source._index)
            self._order = list(source._order)
        elif isinstance(source, typing.Mapping):
            for key in source.keys():
                self.set(key, source[key])
        else:
            for key, value in source:
                self.set(key, value)

    @property
    def count(self) -> int:
        """
        Number of entries in this map.
        """
        return len(self._order)

    def copy(self) -> "OrderedMap[KeyT, ValueT]":
        """
        Return a copy of this map.

        The copy does not share any state with this map, so mutating one of
        them never affects the other one. The values themselves are not copied.
        """
        return type(self)(self)

    def describe(self) -> str:
        """
        Return a human-readable representation of this map.

        Each entry is rendered as ``"key" : "value"`` and the entries are
        joined by ``", "``, in iteration order. This format is intended for
        diagnostic output only.
        """
        return ", ".join(
            '"{0}" : "{1}"'.format(key, value) for key, value in self.items())

    @typing.overload
    def get(self, key: KeyT) -> typing.Optional[ValueT]:
        ...

    @typing.overload
    def get(self, key: KeyT, default: ValueT) -> ValueT:
        ...

    def get(self, key, default=None):
        """
        Return the value for ``key`` or ``default`` if the key is not present.

        :param key:
            key to be looked up.
        :param default:
            value returned when ``key`` is not in this map. The default is
            ``None``.
        :return:
            value for ``key`` or ``default``.
        """
        return self._index.get(key, default)

    def items(self) -> typing.Iterator[typing.Tuple[KeyT, ValueT]]:
        """
        Return an iterator over the ``(key, value)`` pairs of this map in
        iteration order.

        The values are looked up lazily, so a value that is updated before the
        iterator reaches its key is returned with its updated value. Inserting
        or removing keys while the iterator is in use results in a
        ``RuntimeError``.
        """
        return ((key, self._index[key]) for key in self._iter_order())

    def keys(self) -> typing.Tuple[KeyT, ...]:
        """
        Return the keys of this map in iteration order.

        The returned tuple is a snapshot: later changes to this map are not
        reflected by it.
        """
        return tuple(self._order)

    def remove(self, key: KeyT) -> None:
        """
        Remove ``key`` and its value from this map.

        If ``key`` is not present, this method does nothing.
        """
        if self._index.pop(key, _MISSING) is not _MISSING:
            self._order.remove(key)

    def remove_all(self, keep_capacity: int = 0) -> None:
        """
        Remove all entries from this map.

        :param keep_capacity:
            number of entries for which storage should be kept reserved. Like
            the ``minimum_capacity`` of the constructor, this is only a hint.
        """
        _check_capacity(keep_capacity)
        self._index.clear()
        self._order.clear()

    def set(self, key: KeyT, value: ValueT) -> typing.Optional[ValueT]:
        """
        Set the value for ``key``.

        If ``key`` is not present yet, it is added at the end of the iteration
        order. Otherwise, its value is replaced and its position is kept.

        :param key:
            key for which the value shall be set.
        :param value:
            new value for the key.
        :return:
            the value that was replaced or ``None`` if ``key`` has not been
            present before.
        """
        previous = self._index.get(key, _MISSING)
        self._index[key] = value
        if previous is _MISSING:
            self._order.append(key)
            return None
        return previous

    def sort_keys(
            self,
            is_ordered_before: typing.Optional[
                typing.Callable[[KeyT, KeyT], bool]] = None,
            *,
            key: typing.Optional[typing.Callable[[KeyT], typing.Any]] = None,
            reverse: bool = False) -> None:
        """
        Reorder the keys of this map.

        The values are not affected. This is the only operation that places
        keys at a position that is not determined by their insertion order.
        Keys that are inserted afterwards are still appended at the end.

        The sort is stable, so keys that are considered equivalent keep their
        relative order.

        :param is_ordered_before:
            predicate that returns ``True`` if its first argument should be
            placed before its second argument. Cannot be combined with
            ``key``. If neither is given, the keys are compared directly.
        :param key:
            function extracting a sort key from each key, as accepted by
            ``list.sort``.
        :param reverse:
            if ``True``, the resulting order is reversed.
        """
        if is_ordered_before is not None:
            if key is not None:
                raise TypeError(
                    "is_ordered_before and key must not be specified both.")

            def compare(left, right):
                if is_ordered_before(left, right):
                    return -1
                if is_ordered_before(right, left):
                    return 1
                return 0

            key = functools.cmp_to_key(compare)
        self._order.sort(key=key, reverse=reverse)

    def values(self) -> typing.Iterator[ValueT]:
        """
        Return an iterator over the values of this map in iteration order.

        Like with `items`, the values are looked up lazily.
        """
        return (self._index[key] for key in self._iter_order())

    def clear(self) -> None:
        # The implementation inherited from MutableMapping removes one item at
        # a time.
        self.remove_all()

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __copy__(self) -> "OrderedMap[KeyT, ValueT]":
        return self.copy()

    def __delitem__(self, key: KeyT) -> None:
        if key not in self._index:
            raise KeyError(key)
        self.remove(key)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedMap):
            return self._order == other._order and self._index == other._index
        return super().__eq__(other)

    def __getitem__(self, key: KeyT) -> ValueT:
        return self._index[key]

    def __iter__(self) -> typing.Iterator[KeyT]:
        return self._iter_order()

    def __len__(self) -> int:
        return len(self._order)

    def __repr__(self) -> str:
        return "{0}({1!r})".format(type(self).__name__, list(self.items()))

    def __reversed__(self) -> typing.Iterator[KeyT]:
        return self._iter_order(reverse=True)

    def __setitem__(self, key: KeyT, value: ValueT) -> None:
        self.set(key, value)

    def __str__(self) -> str:
        return self.describe()

    def _iter_order(self, reverse=False):
        # The size is captured when the iterator is created, not when it is
        # first advanced.
        size = len(self._order)
        if reverse:
            positions = range(size - 1, -1, -1)
        else:
            positions = range(size)
        return self._iter_positions(size, positions)

    def _iter_positions(self, size, positions):
        for position in positions:
            self._check_size(size)
            yield self._order[position]
        # Entries might have been added or removed after the last element has
        # been returned.
        self._check_size(size)

    def _check_size(self, size):
        if len(self._order) != size:
            raise RuntimeError("OrderedMap changed size during iteration")
