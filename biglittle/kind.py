#!/usr/bin/env python

"""
biglittle/kind.py

===============================================================================

    Copyright (C) 2019 Rudolf Cardinal (rudolf@pobox.com).

    This file is part of biglittle.

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <https://www.gnu.org/licenses/>.

===============================================================================

Kinds (Big/Little) and the typed indices and preference ranks that belong to
each kind.

A :class:`BigIndex` and a :class:`LittleIndex` may hold the same integer, but
they are different types: they never compare equal, cannot be ordered against
each other, and every API that takes one rejects the other.

"""

from enum import Enum
from typing import Any, Generic, Type, TypeVar, Union

from cardinal_pythonlib.enumlike import CaseInsensitiveEnumMeta

T = TypeVar("T")


# =============================================================================
# Kind
# =============================================================================


class Kind(Enum, metaclass=CaseInsensitiveEnumMeta):
    """
    The two sides of the matching. Closed: there are only ever these two.
    """

    BIG = "Big"
    LITTLE = "Little"

    def __str__(self) -> str:
        return self.value

    @property
    def opposite(self) -> "Kind":
        """
        The kind that this kind expresses preferences about.
        """
        return Kind.LITTLE if self is Kind.BIG else Kind.BIG


# =============================================================================
# Typed integers
# =============================================================================


class _KindedInt(object):
    """
    An integer tagged with a :class:`Kind`. Subclasses set ``KIND``.
    Values of different subclasses never compare equal.
    """

    KIND = None  # type: Kind
    MINIMUM = 0
    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        # bool is a subclass of int; don't let True sneak in as 1.
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(
                f"{type(self).__name__} needs an int, not {value!r}"
            )
        if value < self.MINIMUM:
            raise ValueError(
                f"{type(self).__name__} must be >= {self.MINIMUM}; "
                f"was {value!r}"
            )
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return f"{self.KIND}#{self._value}"

    def __hash__(self) -> int:
        return hash((self.KIND, self._value))

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return False
        return self._value == other._value

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def _check_comparable(self, other: Any) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"Can't compare {type(self).__name__} with "
                f"{type(other).__name__}"
            )

    def __lt__(self, other: "_KindedInt") -> bool:
        self._check_comparable(other)
        return self._value < other._value

    def __le__(self, other: "_KindedInt") -> bool:
        self._check_comparable(other)
        return self._value <= other._value

    def __gt__(self, other: "_KindedInt") -> bool:
        self._check_comparable(other)
        return self._value > other._value

    def __ge__(self, other: "_KindedInt") -> bool:
        self._check_comparable(other)
        return self._value >= other._value


class BigIndex(_KindedInt):
    """
    Zero-based index of a Big.
    """

    KIND = Kind.BIG
    __slots__ = ()


class LittleIndex(_KindedInt):
    """
    Zero-based index of a Little.
    """

    KIND = Kind.LITTLE
    __slots__ = ()


class BigPreference(_KindedInt):
    """
    A rank expressed by a Big about a Little (1 = most preferred).
    """

    KIND = Kind.BIG
    MINIMUM = 1
    __slots__ = ()


class LittlePreference(_KindedInt):
    """
    A rank expressed by a Little about a Big (1 = most preferred).
    """

    KIND = Kind.LITTLE
    MINIMUM = 1
    __slots__ = ()


Index = Union[BigIndex, LittleIndex]
Preference = Union[BigPreference, LittlePreference]

_INDEX_TYPES = {
    Kind.BIG: BigIndex,
    Kind.LITTLE: LittleIndex,
}
_PREFERENCE_TYPES = {
    Kind.BIG: BigPreference,
    Kind.LITTLE: LittlePreference,
}


def index_type(kind: Kind) -> Type[_KindedInt]:
    """
    The index class for a kind.
    """
    return _INDEX_TYPES[kind]


def preference_type(kind: Kind) -> Type[_KindedInt]:
    """
    The preference-rank class for a kind.
    """
    return _PREFERENCE_TYPES[kind]


def kind_of(x: _KindedInt) -> Kind:
    """
    The kind of an index or preference rank.
    """
    if not isinstance(x, _KindedInt):
        raise TypeError(f"Not a typed index or preference: {x!r}")
    return x.KIND


def check_index(kind: Kind, index: Any) -> None:
    """
    Raises :exc:`TypeError` unless ``index`` is an index of the given kind.
    """
    expected = _INDEX_TYPES[kind]
    if type(index) is not expected:
        raise TypeError(
            f"Expected a {expected.__name__}, got {index!r}"
        )


# =============================================================================
# PerKind
# =============================================================================


class PerKind(Generic[T]):
    """
    Holds one value per kind, and picks the right one for a given kind.
    """

    __slots__ = ("big", "little")

    def __init__(self, big: T, little: T) -> None:
        self.big = big
        self.little = little

    def select(self, kind: Kind) -> T:
        if kind is Kind.BIG:
            return self.big
        if kind is Kind.LITTLE:
            return self.little
        raise TypeError(f"Not a Kind: {kind!r}")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PerKind):
            return NotImplemented
        return self.big == other.big and self.little == other.little

    def __repr__(self) -> str:
        return f"PerKind(big={self.big!r}, little={self.little!r})"
