"""passwdauth utility functions"""
#=================================================================================
#imports
#=================================================================================
#core
import logging; log = logging.getLogger(__name__)
import os
try:
    import fcntl
except ImportError: #pragma: no cover - non-posix hosts
    fcntl = None
#site
#pkg
#local
__all__ = [
    #host capabilities
    "has_flock",

    #bytes<->unicode
    "to_bytes",
    "is_ascii_codec",

    #string manipulation
    "consteq",
    "splitcomma",

    #constants
    "MAX_PASSWORD_SIZE",
]

#=================================================================================
#constants
#=================================================================================

#: upper limit on size of passwords handed to hash algorithms.
MAX_PASSWORD_SIZE = int(os.environ.get("PASSWDAUTH_MAX_PASSWORD_SIZE") or 4096)

#: whether the host offers advisory flock() locking
has_flock = fcntl is not None and hasattr(fcntl, "flock")

#=================================================================================
#bytes <-> unicode
#=================================================================================
def to_bytes(source, encoding="utf-8", errname="value"):
    """helper to encode unicode -> bytes; passes bytes through unchanged.

    :arg source: source string, unicode or bytes.
    :param encoding: encoding used for unicode strings.
    :param errname: name of parameter, used in error messages.

    :raises TypeError: if source is not unicode or bytes.
    """
    if isinstance(source, bytes):
        return source
    elif isinstance(source, str):
        return source.encode(encoding)
    else:
        from passwdauth.exc import ExpectedStringError
        raise ExpectedStringError(source, errname)

def is_ascii_codec(codec):
    "test if codec is 7-bit ascii compatible, as required by the passwd format"
    return ":\n#".encode(codec) == b":\n#"

#=================================================================================
#string helpers
#=================================================================================
def consteq(left, right):
    """check two strings/bytes for equality, taking constant time relative
    to the size of the righthand input.

    Used for every final digest comparison, so that timing won't reveal
    how much of a stored hash an attacker's guess matched.
    """
    # validate types
    if isinstance(left, str):
        if not isinstance(right, str):
            raise TypeError("inputs must be both unicode or bytes")
        left = left.encode("utf-8", "surrogateescape")
        right = right.encode("utf-8", "surrogateescape")
    elif isinstance(left, bytes):
        if not isinstance(right, bytes):
            raise TypeError("inputs must be both unicode or bytes")
    else:
        raise TypeError("inputs must be both unicode or bytes")

    # NOTE: the double-if construction below makes the same number of
    # operations run whether or not left & right are the same size.
    same = (len(left) == len(right))
    if same:
        tmp = left
        result = 0
    if not same:
        # sizes differ: fail regardless of contents, but still do
        # exactly len(right) iterations by comparing right to itself.
        tmp = right
        result = 1

    for l, r in zip(tmp, right):
        result |= l ^ r
    return result == 0

def splitcomma(source, sep=","):
    """split comma-separated string into list of elements,
    stripping whitespace and discarding empty elements.
    """
    return [
        elem.strip()
        for elem in source.split(sep)
        if elem.strip()
    ]

#=================================================================================
#eof
#=================================================================================
