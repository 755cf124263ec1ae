#! /usr/bin/env python

import os.path
import sys

from setuptools import setup

version = "1.0.0"

if (not os.path.exists(os.path.join("pysaslprep","version.py"))
                                    or "make_version" in sys.argv):
    with open("pysaslprep/version.py", "w") as version_py:
        version_py.write("# pylint: disable=C0111,C0103\n")
        version_py.write("version = {0!r}\n".format(version))
    if "make_version" in sys.argv:
        sys.exit(0)
else:
    exec(open(os.path.join("pysaslprep", "version.py")).read())

setup(
    name =      'pysaslprep',
    version =   version,
    description =   'SASLprep (RFC 4013) preparation of user names and passwords',
    author =    'Jacek Konieczny',
    author_email =  'jajcus@jajcus.net',
    classifiers = [
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: GNU Library or Lesser General Public License (LGPL)",
            "Operating System :: OS Independent",
            "Programming Language :: Python",
            "Programming Language :: Python :: 3",
            "Topic :: Security",
            "Topic :: Text Processing",
            "Topic :: Software Development :: Libraries :: Python Modules",
        ],
    license =   'LGPL',
    python_requires = '>=3.6',
    install_requires = [],
    packages = [
        'pysaslprep',
        'pysaslprep.test',
    ],
    test_suite = "pysaslprep.test.discover",
)
