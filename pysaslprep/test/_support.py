"""Support functions for pysaslprep test suite."""

import sys
import logging
import unittest

from pysaslprep.tables import ClassificationTables

# code points used by the synthetic tables
SOFT_HYPHEN = 0x00AD
NO_BREAK_SPACE = 0x00A0
BELL = 0x0007
HEBREW_ALEF = 0x05D0
HEBREW_BET = 0x05D1
CYPRIOT_A = 0x10800

def make_tables(**categories):
    """Build small classification tables for the tests.

    Categories not given get the values most tests expect; pass an empty
    tuple to clear one.
    """
    defaults = {
        "map_to_nothing": (SOFT_HYPHEN,),
        "non_ascii_space": (NO_BREAK_SPACE,),
        "prohibited": (BELL, (0xD800, 0xDFFF)),
        "bidi_ral": (HEBREW_ALEF, HEBREW_BET, CYPRIOT_A),
        "bidi_l": (range(ord("A"), ord("Z") + 1),
                                            range(ord("a"), ord("z") + 1)),
        }
    defaults.update(categories)
    return ClassificationTables.build(**defaults)

# pylint: disable=W0602,C0103
logging_ready = False
def setup_logging():
    """Set up logging for the tests.

    Log level used depends on number of '-v' in sys.argv
    """
    # pylint: disable=W0603
    global logging_ready
    if logging_ready:
        return
    if sys.argv.count("-v") > 2:
        logging.basicConfig(level=logging.DEBUG)
    elif sys.argv.count("-v") == 2:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.ERROR)
    logging_ready = True

def filter_tests(suite):
    """Make a new TestSuite from `suite`, removing test classes
    with names starting with '_'."""
    result = unittest.TestSuite()
    for test in suite:
        if isinstance(test, unittest.TestSuite):
            result.addTest(filter_tests(test))
        elif not test.__class__.__name__.startswith("_"):
            result.addTest(test)
    return result

def load_tests(loader, tests, pattern):
    """Use default test list, just remove the classes which names start with
    '_'."""
    # pylint: disable=W0613
    suite = filter_tests(tests)
    return suite
