#!/usr/bin/env python

"""
biglittle/names.py

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

Name registry: names <-> typed indices, one mapping per kind.

"""

import logging
from typing import Dict, List, Optional

from biglittle.kind import Index, Kind, PerKind, check_index, index_type

log = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================


class CrossKindNameError(ValueError):
    """
    Raised when a name is registered for one kind but is already registered
    for the other.
    """

    def __init__(self, kind: Kind, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(
            f"Can't register {name!r} as a {kind}: already registered as a "
            f"{kind.opposite}"
        )


class NameNotFoundError(KeyError):
    """
    Raised when a name or index is not in the registry.
    """

    def __str__(self) -> str:
        # KeyError's default repr-quotes its argument.
        return str(self.args[0]) if self.args else ""


# =============================================================================
# Names
# =============================================================================


class Names(object):
    """
    Two bijections (name <-> index), one for Bigs and one for Littles. A name
    can't be in both. Indices are handed out in insertion order, starting at
    0, and never change.
    """

    def __init__(self) -> None:
        self._names = PerKind([], [])  # type: PerKind[List[str]]
        self._indices = PerKind({}, {})  # type: PerKind[Dict[str, Index]]

    def __str__(self) -> str:
        bigs = ", ".join(self._names.big)
        littles = ", ".join(self._names.little)
        return f"Names(Bigs: [{bigs}]; Littles: [{littles}])"

    def __repr__(self) -> str:
        return (
            f"Names(big={self._names.big!r}, little={self._names.little!r})"
        )

    def __contains__(self, name: str) -> bool:
        return name in self._indices.big or name in self._indices.little

    def insert(self, kind: Kind, name: str) -> Index:
        """
        Registers ``name`` as a member of ``kind`` and returns its index.
        Re-inserting a name into the same kind returns the existing index.

        Raises:
            :exc:`CrossKindNameError` if the name belongs to the other kind
        """
        existing = self._indices.select(kind).get(name)
        if existing is not None:
            return existing
        if name in self._indices.select(kind.opposite):
            raise CrossKindNameError(kind, name)
        names = self._names.select(kind)
        index = index_type(kind)(len(names))
        names.append(name)
        self._indices.select(kind)[name] = index
        log.debug(f"Registered {kind} {name!r} as {index}")
        return index

    def name(self, kind: Kind, index: Index) -> Optional[str]:
        """
        The name for an index, or ``None``.
        """
        check_index(kind, index)
        names = self._names.select(kind)
        i = index.value
        return names[i] if i < len(names) else None

    def index(self, kind: Kind, name: str) -> Optional[Index]:
        """
        The index for a name, or ``None``.
        """
        return self._indices.select(kind).get(name)

    def get_name(self, kind: Kind, index: Index) -> str:
        """
        As for :meth:`name`, but raises :exc:`NameNotFoundError` if absent.
        """
        name = self.name(kind, index)
        if name is None:
            raise NameNotFoundError(f"No {kind} with index {index.value}")
        return name

    def get_index(self, kind: Kind, name: str) -> Index:
        """
        As for :meth:`index`, but raises :exc:`NameNotFoundError` if absent.
        """
        index = self.index(kind, name)
        if index is None:
            raise NameNotFoundError(f"No {kind} named {name!r}")
        return index

    def count(self, kind: Kind) -> int:
        return len(self._names.select(kind))

    def names(self, kind: Kind) -> List[str]:
        """
        All names of this kind, in index order.
        """
        return list(self._names.select(kind))
