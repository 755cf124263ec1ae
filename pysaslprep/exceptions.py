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

"""Exceptions raised by the string preparation procedures.

Every failure of a stringprep profile is reported with a `StringprepError`
subclass. The subclasses carry a `StringprepError.condition` name, so the
kind of failure may be inspected either by type or by name.

The messages never include the offending string, as the prepared strings
are usually credentials.
"""

__docformat__ = "restructuredtext en"

class StringprepError(ValueError):
    """Base class for the string preparation errors.

    :CVariables:
        - `condition`: name of the error condition
        - `reference`: the normative reference for the violated rule
    :Types:
        - `condition`: `str`
        - `reference`: `str`
    """
    condition = "undefined-condition"
    reference = "https://tools.ietf.org/html/rfc3454"
    description = "String preparation failed"
    def __init__(self, message = None):
        if message is None:
            message = "{0}, see {1}".format(self.description, self.reference)
        ValueError.__init__(self, message)

class InvalidInputTypeError(StringprepError, TypeError):
    """Raised when the value to prepare is not a Unicode string.

    :Ivariables:
        - `value_type`: type of the rejected value
    """
    condition = "invalid-input-type"
    def __init__(self, value_type):
        StringprepError.__init__(self,
                    "Expected str, got {0}".format(value_type.__name__))
        self.value_type = value_type

class _CodePointError(StringprepError):
    """Base class for errors caused by a single code point.

    :Ivariables:
        - `code_point`: the offending code point
        - `position`: index of the code point in the normalized sequence
    :Types:
        - `code_point`: `int`
        - `position`: `int`
    """
    def __init__(self, code_point, position):
        StringprepError.__init__(self)
        self.code_point = code_point
        self.position = position

class ProhibitedCharacterError(_CodePointError):
    """Raised when the prepared string contains a prohibited character."""
    condition = "prohibited-character"
    reference = "https://tools.ietf.org/html/rfc4013#section-2.3"
    description = "Prohibited character"

class UnassignedCodePointError(_CodePointError):
    """Raised when the prepared string contains an unassigned code point
    and unassigned code points are not allowed."""
    condition = "unassigned-code-point"
    reference = "https://tools.ietf.org/html/rfc4013#section-2.5"
    description = "Unassigned code point"

class BidiMixedDirectionError(StringprepError):
    """Raised when the string contains both RandALCat and LCat characters."""
    condition = "bidi-mixed-direction"
    reference = "https://tools.ietf.org/html/rfc3454#section-6"
    description = "String must not contain RandALCat and LCat at the same time"

class BidiEdgePlacementError(StringprepError):
    """Raised when a string containing RandALCat characters does not start
    and end with one."""
    condition = "bidi-edge-placement"
    reference = "https://tools.ietf.org/html/rfc3454#section-6"
    description = ("Bidirectional RandALCat character must be the first"
                                " and the last character of the string")

# vi: sts=4 et sw=4
