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

"""Conversion between strings and code point sequences.

A Python string may still contain UTF-16 surrogate pairs stored as two
separate characters (e.g. after decoding with the 'surrogatepass' error
handler). `decode` joins such pairs, so the stringprep tables always see
whole Unicode scalar values.
"""

__docformat__ = "restructuredtext en"

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF

def is_high_surrogate(value):
    """Check if `value` is a UTF-16 high (leading) surrogate."""
    return HIGH_SURROGATE_MIN <= value <= HIGH_SURROGATE_MAX

def is_low_surrogate(value):
    """Check if `value` is a UTF-16 low (trailing) surrogate."""
    return LOW_SURROGATE_MIN <= value <= LOW_SURROGATE_MAX

def decode(string):
    """Convert a string into a sequence of Unicode code points.

    Surrogate pairs are combined into a single code point, unpaired
    surrogates are passed unchanged.

    :Parameters:
        - `string`: the string to decode
    :Types:
        - `string`: `str`

    :returntype: `tuple` of `int`
    """
    result = []
    size = len(string)
    i = 0
    while i < size:
        value = ord(string[i])
        if is_high_surrogate(value) and i + 1 < size:
            next_value = ord(string[i + 1])
            if is_low_surrogate(next_value):
                result.append((value - HIGH_SURROGATE_MIN) * 0x400
                            + (next_value - LOW_SURROGATE_MIN) + 0x10000)
                i += 2
                continue
        result.append(value)
        i += 1
    return tuple(result)

def encode(code_points):
    """Build a string from a sequence of code points.

    :returntype: `str`
    """
    return "".join(chr(value) for value in code_points)

# vi: sts=4 et sw=4
