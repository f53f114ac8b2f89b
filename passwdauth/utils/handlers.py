"""passwdauth.utils.handlers - framework for implementing scheme handlers"""
#=========================================================
#imports
#=========================================================
#core
import logging; log = logging.getLogger(__name__)
#site
#libs
from passwdauth import exc
from passwdauth.utils import consteq, to_bytes, MAX_PASSWORD_SIZE
#pkg
#local
__all__ = [
    #helpers
    'validate_secret',
    'norm_hash',
    'identify_regexp',
    'identify_prefix',

    #framework for implementing handlers
    'StaticHandler',
    'PasslibHandler',
]

#=========================================================
#secret helpers
#=========================================================
def validate_secret(secret):
    "ensure secret has correct type & size, returning it encoded as bytes"
    if not isinstance(secret, (str, bytes)):
        raise exc.ExpectedStringError(secret, "secret")
    if len(secret) > MAX_PASSWORD_SIZE:
        raise exc.PasswordSizeError()
    return to_bytes(secret, "utf-8", "secret")

def norm_hash(hash, handler=None):
    "coerce hash to native str, or reject it"
    if isinstance(hash, bytes):
        try:
            return hash.decode("ascii")
        except UnicodeDecodeError:
            raise exc.MalformedHashError(handler, "non-ascii characters")
    if not isinstance(hash, str):
        raise exc.ExpectedStringError(hash, "hash")
    return hash

#=========================================================
#identify helpers
#=========================================================
def identify_regexp(hash, pat):
    "identify() helper for matching regexp"
    if not hash:
        return False
    if isinstance(hash, bytes):
        try:
            hash = hash.decode("ascii")
        except UnicodeDecodeError:
            return False
    return pat.match(hash) is not None

def identify_prefix(hash, prefix):
    "identify() helper for matching against prefixes"
    #NOTE: prefix may be a tuple of strings (since startswith supports that)
    if not hash:
        return False
    if isinstance(hash, bytes):
        try:
            hash = hash.decode("ascii")
        except UnicodeDecodeError:
            return False
    return hash.startswith(prefix)

#=====================================================
#StaticHandler
#=====================================================
class StaticHandler(object):
    """helper class for implementing custom schemes which have no settings.

    These schemes hash a password to *exactly* the same string every time,
    there is no salt to extract before verifying.

    Subclasses fill out :attr:`name`, optionally :attr:`ident`,
    and implement :meth:`_calc_hash`, which receives the password
    as bytes and returns the full encoded string.
    :meth:`verify` compares that result to the stored hash in constant time.
    """
    name = None #required - handler name
    ident = None #identifying prefix, None for untagged schemes

    @classmethod
    def identify(cls, hash):
        if cls.ident is None:
            # NOTE: subclasses without a prefix should override this.
            return False
        return identify_prefix(hash, cls.ident)

    @classmethod
    def _calc_hash(cls, secret):
        raise NotImplementedError("%s subclass must implement _calc_hash()" % (cls,))

    @classmethod
    def verify(cls, secret, hash):
        secret = validate_secret(secret)
        if hash is None:
            raise ValueError("no hash specified")
        hash = norm_hash(hash, cls)
        return consteq(cls._calc_hash(secret), hash)

#=====================================================
#PasslibHandler
#=====================================================
class PasslibHandler(object):
    """helper class for exposing one of :mod:`passlib.hash`'s handlers
    as a verify-only scheme.

    passlib does the hashing; this class owns recognition
    and argument checking, so all schemes share the same
    password size limit and the same errors for bad input.

    Class Attributes
    ================

    .. attribute:: backend

        the :mod:`passlib.hash` handler which verifies the password.

    .. attribute:: ident

        identifying prefix of the scheme's hashes,
        ``None`` for untagged schemes.

    .. attribute:: _hash_regex

        if set, :meth:`identify` requires the whole hash to match it,
        instead of just checking :attr:`ident`.
        untagged schemes must provide one.
    """
    #=====================================================
    #class attrs
    #=====================================================
    name = None #required - handler name
    ident = None #identifying prefix, None for untagged schemes
    backend = None #required - passlib handler
    _hash_regex = None

    #=====================================================
    #methods
    #=====================================================
    @classmethod
    def identify(cls, hash):
        if cls._hash_regex is not None:
            return identify_regexp(hash, cls._hash_regex)
        if cls.ident is None:
            return False
        return identify_prefix(hash, cls.ident)

    @classmethod
    def verify(cls, secret, hash):
        """verify secret against hash.

        :raises TypeError: if secret or hash is not a string.
        :raises ValueError: if hash is malformed, or secret is too large.
        """
        secret = validate_secret(secret)
        hash = norm_hash(hash, cls)
        if not cls.identify(hash):
            raise exc.InvalidHashError(cls)
        return cls.backend.verify(secret, hash)

#=========================================================
#eof
#=========================================================
