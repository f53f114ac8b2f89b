"""passwdauth setup script"""
#=========================================================
#init script env - ensure cwd = root of source dir
#=========================================================
import os
root_dir = os.path.abspath(os.path.join(__file__,".."))
os.chdir(root_dir)

#=========================================================
#imports
#=========================================================
import re
from setuptools import setup

#=========================================================
#version string
#=========================================================
with open(os.path.join(root_dir, "passwdauth", "__init__.py")) as vh:
    VERSION = re.search(r'^__version__\s*=\s*"(.*?)"\s*$', vh.read(), re.M).group(1)

#=========================================================
#static text
#=========================================================
SUMMARY = "authenticate users against passwd and htpasswd style files"

DESCRIPTION = """\
passwdauth checks a username & password against a colon-delimited
credential file, such as ``/etc/passwd`` or an Apache ``.htpasswd`` file.

It recognizes Apache's ``$apr1$`` md5-crypt variant, BSD/Linux ``$1$`` md5-crypt,
the ``{SHA}`` digest written by ``htpasswd -s``, the hashes accepted by
unix ``crypt()`` (DES, BSDi extended DES, sha256-crypt and sha512-crypt)
and plaintext passwords. Applications choose
which of these schemes are allowed, and may register their own.
"""

KEYWORDS = "password authentication passwd htpasswd apache crypt md5-crypt apr1"

#=========================================================
#config setup
#=========================================================
config = dict(
    #package info
    packages = [
        "passwdauth",
            "passwdauth.handlers",
            "passwdauth.tests",
            "passwdauth.utils",
        ],
    zip_safe=True,

    #metadata
    name = "passwdauth",
    version = VERSION,
    license = "BSD",

    description = SUMMARY,
    long_description = DESCRIPTION,
    keywords = KEYWORDS,
    classifiers = [
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Security",
        "Topic :: System :: Systems Administration :: Authentication/Directory",
        "Topic :: Software Development :: Libraries",
    ],

    python_requires = ">=3.6",
    install_requires = [
        #does the hashing for every builtin scheme except plaintext
        "passlib >= 1.7",
    ],
    extras_require = {
        "test": ["pytest"],
    },
)

#=========================================================
#build
#=========================================================
setup(**config)

#=========================================================
#EOF
#=========================================================
