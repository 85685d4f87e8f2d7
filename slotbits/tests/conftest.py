from __future__ import annotations

import enum

import pytest

from slotbits.bitset import Bitset


class Flag(enum.IntEnum):
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4


N = len(Flag)


@pytest.fixture  # type: ignore[misc]
def flags() -> type[Flag]:
    return Flag


@pytest.fixture  # type: ignore[misc]
def ace() -> Bitset:
    return Bitset.initial(N, Flag.A, Flag.C, Flag.E)
