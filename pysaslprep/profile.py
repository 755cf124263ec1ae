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

"""Stringprep (RFC 3454) profile engine.

Normative reference:
  - :RFC:`3454`
"""

__docformat__ = "restructuredtext en"

from collections import namedtuple
from unicodedata import ucd_3_2_0

from .codepoints import decode, encode
from .exceptions import InvalidInputTypeError
from .exceptions import ProhibitedCharacterError, UnassignedCodePointError
from .exceptions import BidiMixedDirectionError, BidiEdgePlacementError

SPACE = 0x20

class PrepareOptions(namedtuple("PrepareOptions", "allow_unassigned")):
    """Options of the string preparation procedure.

    :Ivariables:
        - `allow_unassigned`: accept unassigned code points (as for 'query'
          strings)
    :Types:
        - `allow_unassigned`: `bool`
    """
    __slots__ = ()
    def __new__(cls, allow_unassigned = False):
        return super(PrepareOptions, cls).__new__(cls, bool(allow_unassigned))

DEFAULT_OPTIONS = PrepareOptions()

def nfkc(string):
    """Unicode Normalization Form KC, as defined by Unicode 3.2 (the
    version stringprep is bound to)."""
    return ucd_3_2_0.normalize("NFKC", string)

class Profile(object):
    """Base class for stringprep profiles.

    A profile is immutable and keeps no state between the `prepare` calls.

    :Ivariables:
        - `tables`: code point tables used by the profile
        - `normalization`: the normalization function or `None`
        - `bidi`: `True` if the bidirectional string checks should be done
    :Types:
        - `tables`: `pysaslprep.tables.ClassificationTables`
        - `normalization`: callable accepting and returning `str`
        - `bidi`: `bool`
    """
    def __init__(self, tables, normalization = nfkc, bidi = True):
        self.tables = tables
        self.normalization = normalization
        self.bidi = bidi

    def prepare(self, data, allow_unassigned = False):
        """Complete string preparation procedure for 'stored' strings.

        :Parameters:
            - `data`: the string to prepare
            - `allow_unassigned`: if `True`, unassigned code points are
              accepted
        :Types:
            - `data`: `str`
            - `allow_unassigned`: `bool`

        :raise pysaslprep.exceptions.StringprepError: when the string
            cannot be prepared
        :return: the prepared string
        :returntype: `str`
        """
        if not isinstance(data, str):
            raise InvalidInputTypeError(type(data))
        if not data:
            return ""
        code_points = self.map(decode(data))
        data, code_points = self.normalize(code_points)
        self.prohibit(code_points)
        if not allow_unassigned:
            self.check_unassigned(code_points)
        if self.bidi:
            self.check_bidi(code_points)
        return data

    def prepare_query(self, data):
        """Complete string preparation procedure for 'query' strings
        (without checks for unassigned codes)."""
        return self.prepare(data, allow_unassigned = True)

    def map(self, code_points):
        """Mapping part of string preparation.

        Non-ASCII spaces are mapped to SPACE, then the characters 'commonly
        mapped to nothing' are removed.

        :returntype: `list` of `int`
        """
        space = self.tables.non_ascii_space
        nothing = self.tables.map_to_nothing
        result = [SPACE if value in space else value for value in code_points]
        return [value for value in result if value not in nothing]

    def normalize(self, code_points):
        """Normalization part of string preparation.

        :return: the normalized string and its code points
        :returntype: (`str`, `tuple` of `int`)
        """
        data = encode(code_points)
        if self.normalization:
            data = self.normalization(data)
        return data, decode(data)

    def prohibit(self, code_points):
        """Checks for prohibited characters."""
        prohibited = self.tables.prohibited
        for position, value in enumerate(code_points):
            if value in prohibited:
                raise ProhibitedCharacterError(value, position)

    def check_unassigned(self, code_points):
        """Checks for unassigned character codes."""
        unassigned = self.tables.unassigned
        for position, value in enumerate(code_points):
            if value in unassigned:
                raise UnassignedCodePointError(value, position)

    def check_bidi(self, code_points):
        """Checks if the string is valid for bidirectional printing."""
        bidi_ral = self.tables.bidi_ral
        bidi_l = self.tables.bidi_l
        has_ral = any(value in bidi_ral for value in code_points)
        has_l = any(value in bidi_l for value in code_points)
        if has_ral and has_l:
            raise BidiMixedDirectionError()
        if has_ral and (code_points[0] not in bidi_ral
                                        or code_points[-1] not in bidi_ral):
            raise BidiEdgePlacementError()

# vi: sts=4 et sw=4
