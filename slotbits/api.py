"""slotbits user-facing API.

The :class:`~slotbits.bitset.Bitset` methods cover everything that operates on
a single bitset. This module adds module-level constructors, including one
built around an enumeration of named slots, and helpers to render a bitset as
a table for debugging.

"""

from __future__ import annotations

import enum
import inspect
import operator
from typing import Any, Iterable, Mapping, Sequence, Type, Union

import tabulate
import toolz
from public import private, public
from typing_extensions import SupportsIndex

from .bitset import Bitset

Names = Union[Sequence[str], Type[enum.Enum]]


@private  # type: ignore[misc]
class shiftable(toolz.curry):
    """Shiftable curry.

    Lets a bitset be piped into a formatting function with the right shift
    operator, e.g. ``bitset >> show(names=Color)``.
    """

    @property
    def __signature__(self) -> inspect.Signature:
        return inspect.signature(self.func)  # pragma: no cover

    def __rrshift__(self, other: Bitset) -> Any:
        return self(other)


@private  # type: ignore[misc]
def _member_index(member: Any) -> Any:
    """Return the slot index a member of an enumeration refers to.

    Raises
    ------
    TypeError
        If `member` belongs to an enumeration whose values are not integers

    """
    if isinstance(member, enum.Enum) and not isinstance(member, SupportsIndex):
        return operator.index(member.value)
    return member


@private  # type: ignore[misc]
def _labels(names: Names) -> Mapping[int, str]:
    """Return a mapping from slot index to the label given in `names`."""
    if isinstance(names, type) and issubclass(names, enum.Enum):
        return {_member_index(member): member.name for member in names}
    return dict(enumerate(names))


@public  # type: ignore[misc]
def new(length: SupportsIndex = 0) -> Bitset:
    """Construct a :class:`~slotbits.bitset.Bitset` of cleared slots.

    Parameters
    ----------
    length
        The number of slots

    Raises
    ------
    ValueError
        If `length` is negative

    """
    return Bitset(length)


@public  # type: ignore[misc]
def initial(length: SupportsIndex, *indices: SupportsIndex) -> Bitset:
    """Construct a :class:`~slotbits.bitset.Bitset` with `indices` set.

    Parameters
    ----------
    length
        The number of slots
    indices
        The slots to set. Indices outside of ``[0, length)`` are ignored.

    """
    return Bitset.initial(length, *indices)


@public  # type: ignore[misc]
def from_enum(enumeration: Type[enum.Enum], *members: Any) -> Bitset:
    """Construct a bitset with one slot per value of `enumeration`.

    Parameters
    ----------
    enumeration
        An enumeration whose member values are non-negative integers, usually
        an :class:`enum.IntEnum` counting up from zero
    members
        Members of `enumeration` to set

    Raises
    ------
    TypeError
        If the member values of `enumeration` are not integers

    Examples
    --------
    >>> import enum
    >>> class Color(enum.IntEnum):
    ...     RED = 0
    ...     GREEN = 1
    ...     BLUE = 2
    >>> from_enum(Color, Color.RED, Color.BLUE)
    Bitset{1, 0, 1}

    """
    length = max(map(_member_index, enumeration), default=-1) + 1
    return Bitset.initial(length, *map(_member_index, members))


@private  # type: ignore[misc]
def _rows(bitset: Bitset, names: Names | None) -> Iterable[tuple[Any, ...]]:
    if names is None:
        return ((index, int(bit)) for index, bit in enumerate(bitset))
    labels = _labels(names)
    return (
        (index, labels.get(index, ""), int(bit)) for index, bit in enumerate(bitset)
    )


@public  # type: ignore[misc]
@shiftable
def pretty(
    bitset: Bitset,
    *,
    names: Names | None = None,
    tablefmt: str = "simple",
    **kwargs: Any,
) -> str:
    """Pretty-format a bitset as a table with one row per slot.

    Parameters
    ----------
    bitset
        The bitset to format
    names
        Labels for the slots, either a sequence of strings indexed by slot or
        an enumeration whose member values are slot indices. Slots without a
        label get an empty name. When `names` is omitted the name column is
        left out.
    tablefmt
        The kind of table to use for formatting
    kwargs
        Additional keyword arguments passed to the `tabulate.tabulate`
        function

    Returns
    -------
    str
        Pretty-formatted bitset

    Raises
    ------
    TypeError
        If `names` is an enumeration whose member values are not integers

    See Also
    --------
    slotbits.api.show

    """
    headers = ["index", "state"] if names is None else ["index", "name", "state"]
    return tabulate.tabulate(
        list(_rows(bitset, names)), tablefmt=tablefmt, headers=headers, **kwargs
    )


@public  # type: ignore[misc]
@shiftable
def show(bitset: Bitset, **kwargs: Any) -> None:
    """Pretty-print a bitset.

    Parameters
    ----------
    bitset
        The bitset to print
    kwargs
        Additional keyword arguments passed to the `slotbits.api.pretty`
        function

    See Also
    --------
    slotbits.api.pretty

    """
    print(pretty(bitset, **kwargs))
