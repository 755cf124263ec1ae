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

"""SASLprep stringprep profile.

Normative reference:
  - :RFC:`4013`__
"""

__docformat__ = "restructuredtext en"

import stringprep

from .tables import ClassificationTables, LookupFunction
from .profile import Profile, PrepareOptions, DEFAULT_OPTIONS, nfkc

SASLPREP_TABLES = ClassificationTables.build(
    unassigned = stringprep.in_table_a1,
    map_to_nothing = stringprep.in_table_b1,
    non_ascii_space = stringprep.in_table_c12,
    prohibited = LookupFunction(
                    stringprep.in_table_c12, stringprep.in_table_c21,
                    stringprep.in_table_c22, stringprep.in_table_c3,
                    stringprep.in_table_c4, stringprep.in_table_c5,
                    stringprep.in_table_c6, stringprep.in_table_c7,
                    stringprep.in_table_c8, stringprep.in_table_c9),
    bidi_ral = stringprep.in_table_d1,
    bidi_l = stringprep.in_table_d2)

SASLPREP = Profile(SASLPREP_TABLES, normalization = nfkc, bidi = True)

def prepare(tables, data, options = None):
    """Prepare `data` with the SASLprep procedure, using custom tables.

    :Parameters:
        - `tables`: the code point tables
        - `data`: the string to prepare
        - `options`: preparation options, `DEFAULT_OPTIONS` when not given
    :Types:
        - `tables`: `ClassificationTables`
        - `data`: `str`
        - `options`: `PrepareOptions`

    :raise pysaslprep.exceptions.StringprepError: when the string
        cannot be prepared
    :returntype: `str`
    """
    if options is None:
        options = DEFAULT_OPTIONS
    if tables is SASLPREP_TABLES:
        profile = SASLPREP
    else:
        profile = Profile(tables, normalization = nfkc, bidi = True)
    return profile.prepare(data, allow_unassigned = options.allow_unassigned)

def saslprep(data, allow_unassigned = False):
    """Prepare `data` with the SASLprep procedure and the RFC 3454 tables.

    `allow_unassigned` should be set only for strings which are not stored,
    like query terms.
    """
    return prepare(SASLPREP_TABLES, data, PrepareOptions(allow_unassigned))

# vi: sts=4 et sw=4
