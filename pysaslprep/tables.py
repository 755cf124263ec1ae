#
# (C) Copyright 2011 Jacek Konieczny <jajcus@jajcus.net>
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License Version
# 2.1 as published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program; if not, write to the Free Software
# Foundation, Inc., 675 Mass Ave, Cambridge, MA 02139, USA.
#

"""Code point classification tables for stringprep profiles.

Normative reference:
  - :RFC:`3454`, appendices A to D

A table is any object supporting the ``code_point in table`` test, where
`code_point` is an `int`. Two implementations are provided: `CodePointTable`
holding explicit values and ranges, and `LookupFunction` wrapping character
predicates, like the ones of the standard `stringprep` module.
"""

__docformat__ = "restructuredtext en"

import logging

from bisect import bisect_right
from collections import namedtuple

logger = logging.getLogger("pysaslprep.tables")

CATEGORIES = ("unassigned", "map_to_nothing", "non_ascii_space",
                                        "prohibited", "bidi_ral", "bidi_l")

class CodePointTable(object):
    """Immutable set of code points.

    Single code points are kept in a hash set, ranges in a sorted list
    searched with `bisect`.

    :Ivariables:
        - `singles`: the individual code points
    :Types:
        - `singles`: `frozenset` of `int`
    """
    __slots__ = ("singles", "_starts", "_ends")
    def __init__(self, singles = (), ranges = ()):
        """Initialize the table.

        :Parameters:
            - `singles`: individual code points
            - `ranges`: inclusive ``(first, last)`` code point ranges, in any
              order, possibly overlapping
        :Types:
            - `singles`: iterable of `int`
            - `ranges`: iterable of (`int`, `int`) tuples
        """
        merged = []
        for first, last in sorted(ranges):
            if first > last:
                raise ValueError("Bad code point range: {0:04X}-{1:04X}"
                                                        .format(first, last))
            if merged and first <= merged[-1][1] + 1:
                if last > merged[-1][1]:
                    merged[-1] = (merged[-1][0], last)
            else:
                merged.append((first, last))
        self.singles = frozenset(singles)
        self._starts = tuple(first for first, _ in merged)
        self._ends = tuple(last for _, last in merged)

    @classmethod
    def from_iterable(cls, items):
        """Build a table from a mix of code points, ``(first, last)`` tuples
        and `range` objects."""
        singles = []
        ranges = []
        for item in items:
            if isinstance(item, int):
                singles.append(item)
            elif isinstance(item, range):
                if len(item) and item.step == 1:
                    ranges.append((item.start, item.stop - 1))
                else:
                    singles.extend(item)
            elif isinstance(item, (tuple, list)) and len(item) == 2:
                ranges.append(tuple(item))
            else:
                raise TypeError("Not a code point or range: {0!r}"
                                                                .format(item))
        return cls(singles, ranges)

    @property
    def ranges(self):
        """The merged ranges, sorted."""
        return tuple(zip(self._starts, self._ends))

    def __contains__(self, code_point):
        return code_point in self.singles or self._in_ranges(code_point)

    def __len__(self):
        size = sum(last - first + 1
                            for first, last in zip(self._starts, self._ends))
        outside = [value for value in self.singles
                                            if not self._in_ranges(value)]
        return size + len(outside)

    def __bool__(self):
        return bool(self.singles or self._starts)

    def _in_ranges(self, code_point):
        index = bisect_right(self._starts, code_point) - 1
        return index >= 0 and code_point <= self._ends[index]

    def __repr__(self):
        return "<CodePointTable: {0} singles, {1} ranges>".format(
                                    len(self.singles), len(self._starts))

EMPTY_TABLE = CodePointTable()

class LookupFunction(object):
    """Table defined by character predicates.

    A code point belongs to the table if any of the functions returns
    a true value for the corresponding character.

    :Ivariables:
        - `functions`: the predicates
    :Types:
        - `functions`: `tuple` of callables accepting a one-character `str`
    """
    __slots__ = ("functions",)
    def __init__(self, *functions):
        self.functions = functions

    def __contains__(self, code_point):
        char = chr(code_point)
        for function in self.functions:
            if function(char):
                return True
        return False

    def __repr__(self):
        names = [getattr(func, "__name__", repr(func))
                                                for func in self.functions]
        return "<LookupFunction: {0}>".format(", ".join(names))

def _as_table(value):
    """Convert a table description into a table object."""
    if value is None:
        return EMPTY_TABLE
    if isinstance(value, (CodePointTable, LookupFunction)):
        return value
    if callable(value):
        return LookupFunction(value)
    return CodePointTable.from_iterable(value)

class ClassificationTables(namedtuple("ClassificationTables", CATEGORIES)):
    """The six code point tables used by a stringprep profile.

    The object is immutable and may be shared between threads.

    :Ivariables:
        - `unassigned`: unassigned code points (RFC 3454 A.1)
        - `map_to_nothing`: characters commonly mapped to nothing (B.1)
        - `non_ascii_space`: non-ASCII space characters (C.1.2)
        - `prohibited`: prohibited output (C.1.2 - C.9)
        - `bidi_ral`: characters with bidirectional property R or AL (D.1)
        - `bidi_l`: characters with bidirectional property L (D.2)
    """
    __slots__ = ()

    @classmethod
    def build(cls, **categories):
        """Build the tables from table objects, predicates or iterables of
        code points (as accepted by `CodePointTable.from_iterable`).

        Categories not given are empty.

        :raise TypeError: when an unknown category name is given
        """
        unknown = set(categories) - set(CATEGORIES)
        if unknown:
            raise TypeError("Unknown table categories: {0}".format(
                                                ", ".join(sorted(unknown))))
        tables = cls(*[_as_table(categories.get(name))
                                                    for name in CATEGORIES])
        logger.debug("Classification tables built: {0!r}".format(tables))
        return tables

    def contains(self, category, code_point):
        """Check if `code_point` belongs to the table of `category`.

        :Parameters:
            - `category`: table name, one of `CATEGORIES`
            - `code_point`: the code point to check
        :Types:
            - `category`: `str`
            - `code_point`: `int`

        :raise ValueError: for an unknown category
        :returntype: `bool`
        """
        if category not in CATEGORIES:
            raise ValueError("Unknown table category: {0!r}".format(category))
        return code_point in getattr(self, category)

# vi: sts=4 et sw=4
