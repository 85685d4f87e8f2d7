"""A resizable sequence of boolean flags, one flag per slot."""

from __future__ import annotations

import logging
import operator
from typing import Any, Iterator, List, Optional, Sequence, overload

from typing_extensions import SupportsIndex

logger = logging.getLogger(__name__)


class Bitset(Sequence[bool]):
    """A fixed-length sequence of boolean flags addressed by integer index.

    Slots are not packed into machine words; each slot holds its own
    :class:`bool`. The length only changes through :meth:`resize`,
    :meth:`grow` and :meth:`shrink`, each of which returns a new
    :class:`Bitset` and leaves the receiver untouched. :meth:`set`,
    :meth:`clear` and :meth:`flip` mutate the receiver in place.

    Indices outside of ``[0, len(self))`` given to the mutation and query
    methods are ignored rather than rejected, so that a small bitset can be
    used with the constants of a larger enumeration.

    Attributes
    ----------
    bits
        The backing list of slot values.

    """

    __slots__ = ("bits",)

    def __init__(self, length: SupportsIndex = 0) -> None:
        """Construct a :class:`Bitset` of `length` cleared slots.

        Raises
        ------
        ValueError
            If `length` is negative

        """
        length = operator.index(length)
        if length < 0:
            raise ValueError(
                f"length not greater than or equal to 0, length == {length}"
            )
        self.bits: List[bool] = [False] * length

    @classmethod
    def initial(cls, length: SupportsIndex, *indices: SupportsIndex) -> Bitset:
        """Construct a :class:`Bitset` of `length` slots with `indices` set."""
        bitset = cls(length)
        bitset.set(*indices)
        return bitset

    def _slot(self, index: SupportsIndex) -> Optional[int]:
        """Return `index` as an :class:`int` if it addresses a slot."""
        index = operator.index(index)
        if 0 <= index < len(self.bits):
            return index
        return None

    def _slots(self, indices: tuple[SupportsIndex, ...]) -> Iterator[int]:
        return (slot for slot in map(self._slot, indices) if slot is not None)

    def __len__(self) -> int:
        """Return the number of slots."""
        return len(self.bits)

    def __iter__(self) -> Iterator[bool]:
        """Iterate over the slot values in index order."""
        return iter(self.bits)

    @overload
    def __getitem__(self, index: SupportsIndex) -> bool:
        ...

    @overload
    def __getitem__(self, index: slice) -> List[bool]:
        ...

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return self.bits[index]
        return self.bits[operator.index(index)]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self.bits == other.bits

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return the string representation of a bitset.

        Slots are rendered as ``1`` or ``0`` in index order, e.g.
        ``Bitset{1, 0, 1}``; an empty bitset renders as ``Bitset{}``.

        """
        slots = ", ".join("1" if bit else "0" for bit in self.bits)
        return f"{self.__class__.__name__}{{{slots}}}"

    def __copy__(self) -> Bitset:
        return self.copy()

    def copy(self) -> Bitset:
        """Return an independent copy of this bitset."""
        return self.resize(len(self.bits))

    def resize(self, length: SupportsIndex) -> Bitset:
        """Return a copy of this bitset with `length` slots.

        The first ``min(len(self), length)`` slots are copied; any slots past
        the original length are cleared. A negative `length` is clamped to
        zero.

        """
        length = operator.index(length)
        if length < 0:
            logger.debug(
                "Clamping requested bitset length %d to 0 (current length %d)",
                length,
                len(self.bits),
            )
            length = 0
        resized = type(self)(length)
        prefix = self.bits[:length]
        resized.bits[: len(prefix)] = prefix
        return resized

    def grow(self, delta: SupportsIndex) -> Bitset:
        """Return a copy of this bitset with `delta` more slots."""
        return self.resize(len(self.bits) + operator.index(delta))

    def shrink(self, delta: SupportsIndex) -> Bitset:
        """Return a copy of this bitset with `delta` fewer slots."""
        return self.resize(len(self.bits) - operator.index(delta))

    def set(self, *indices: SupportsIndex) -> None:
        """Set the slots at `indices`, ignoring indices out of range."""
        bits = self.bits
        for slot in self._slots(indices):
            bits[slot] = True

    def clear(self, *indices: SupportsIndex) -> None:
        """Clear the slots at `indices`, ignoring indices out of range."""
        bits = self.bits
        for slot in self._slots(indices):
            bits[slot] = False

    def flip(self, *indices: SupportsIndex) -> None:
        """Toggle the slots at `indices`, ignoring indices out of range."""
        bits = self.bits
        for slot in self._slots(indices):
            bits[slot] = not bits[slot]

    def all(self, *indices: SupportsIndex) -> bool:
        """Return whether every in-range slot in `indices` is set.

        Out of range indices are skipped, so this is vacuously ``True`` when
        none of `indices` address a slot.

        """
        bits = self.bits
        return all(bits[slot] for slot in self._slots(indices))

    def any(self, *indices: SupportsIndex) -> bool:
        """Return whether at least one in-range slot in `indices` is set."""
        bits = self.bits
        return any(bits[slot] for slot in self._slots(indices))

    def indices(self) -> Iterator[int]:
        """Iterate over the indices of the set slots in ascending order."""
        return (index for index, bit in enumerate(self.bits) if bit)

    def count(self, value: bool = True) -> int:
        """Return the number of slots equal to `value`."""
        return self.bits.count(value)
