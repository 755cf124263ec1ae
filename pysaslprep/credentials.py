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

"""Credential handling helpers built on the SASLprep profile.

Normative reference:
  - :RFC:`4013`
  - :RFC:`5802` (the SCRAM ``Normalize()`` function)
"""

__docformat__ = "restructuredtext en"

import hmac
import logging

from .exceptions import StringprepError
from .saslprep import SASLPREP

logger = logging.getLogger("pysaslprep.credentials")

def normalize(str_):
    """The SCRAM Normalize(str) function.

    Accepts both Unicode and UTF-8 encoded byte strings (in the RFC only
    UTF-8 strings are used).

    :returntype: `bytes`
    """
    if isinstance(str_, bytes):
        str_ = str_.decode("utf-8")
    return SASLPREP.prepare(str_).encode("utf-8")

def credentials_equal(first, second, allow_unassigned = False):
    """Compare two credential strings after SASLprep preparation.

    The comparison of the prepared values runs in constant time.

    :raise pysaslprep.exceptions.StringprepError: when any of the strings
        cannot be prepared

    :returntype: `bool`
    """
    first = SASLPREP.prepare(first, allow_unassigned)
    second = SASLPREP.prepare(second, allow_unassigned)
    return hmac.compare_digest(first.encode("utf-8"), second.encode("utf-8"))

class PasswordDatabase(object):
    """Password database interface.

    PasswordDatabase object is responsible for verification of user
    credentials. User names and passwords are compared after preparation
    with the SASLprep profile, so equivalent representations of the same
    credentials match.
    """
    # pylint: disable=R0201
    def get_password(self, username):
        """Get the stored plain text password of a user.

        By default returns `None`. Should be overridden in derived classes.

        :Parameters:
            - `username`: the prepared user name
        :Types:
            - `username`: `str`

        :return: the password or `None` if the user is not known
        :returntype: `str`
        """
        # pylint: disable=W0613
        return None

    def check_password(self, username, password):
        """Check the password validity.

        The supplied values are prepared as 'query' strings, the stored
        password as a 'stored' string.

        :Parameters:
            - `username`: the user name provided by the peer
            - `password`: the password to verify
        :Types:
            - `username`: `str`
            - `password`: `str`

        :return: `True` if the password is valid.
        :returntype: `bool`
        """
        try:
            username = SASLPREP.prepare_query(username)
            password = SASLPREP.prepare_query(password)
        except StringprepError as err:
            logger.debug("Credentials rejected: {0}".format(err.condition))
            return False
        stored = self.get_password(username)
        if stored is None:
            logger.debug("Unknown user: {0!r}".format(username))
            return False
        stored = SASLPREP.prepare(stored)
        result = hmac.compare_digest(stored.encode("utf-8"),
                                                    password.encode("utf-8"))
        logger.debug("Password for {0!r} {1}".format(username,
                                        "valid" if result else "invalid"))
        return result

# vi: sts=4 et sw=4
