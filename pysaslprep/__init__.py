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

"""SASLprep (RFC 4013) preparation of user names and passwords.

The `saslprep` function prepares a string with the standard tables::

    >>> from pysaslprep import saslprep
    >>> saslprep("I\\u00adX")
    'IX'

`prepare` does the same with any `ClassificationTables` and
`PrepareOptions`. Failures are reported with `StringprepError` subclasses.

Normative reference:
  - :RFC:`3454`
  - :RFC:`4013`
"""

__docformat__ = "restructuredtext en"

from .version import version as __version__

from .exceptions import StringprepError, InvalidInputTypeError
from .exceptions import ProhibitedCharacterError, UnassignedCodePointError
from .exceptions import BidiMixedDirectionError, BidiEdgePlacementError
from .codepoints import decode, encode
from .tables import CATEGORIES, ClassificationTables
from .tables import CodePointTable, LookupFunction
from .profile import Profile, PrepareOptions, DEFAULT_OPTIONS, nfkc
from .saslprep import SASLPREP, SASLPREP_TABLES, prepare, saslprep
from .credentials import normalize, credentials_equal, PasswordDatabase

__all__ = [
    "StringprepError", "InvalidInputTypeError", "ProhibitedCharacterError",
    "UnassignedCodePointError", "BidiMixedDirectionError",
    "BidiEdgePlacementError",
    "decode", "encode",
    "CATEGORIES", "ClassificationTables", "CodePointTable", "LookupFunction",
    "Profile", "PrepareOptions", "DEFAULT_OPTIONS", "nfkc",
    "SASLPREP", "SASLPREP_TABLES", "prepare", "saslprep",
    "normalize", "credentials_equal", "PasswordDatabase",
    ]

# vi: sts=4 et sw=4
