"""passwdauth.handlers.misc - misc generic handlers
"""
#=========================================================
#imports
#=========================================================
#core
import logging; log = logging.getLogger(__name__)
#site
#libs
from passwdauth import exc
from passwdauth.utils import consteq
import passwdauth.utils.handlers as uh
#pkg
#local
__all__ = [
    "plaintext",
]

#=========================================================
#handler
#=========================================================
class plaintext(object):
    """This class stores passwords in plaintext.

    * it positively identifies every hash string,
      so it must be the last scheme consulted.
    * unicode passwords are encoded to utf-8 before comparison,
      as are unicode hashes.
    """
    name = "plaintext"
    ident = None
    accepts_all_hashes = True
    _hash_encoding = "utf-8"

    @classmethod
    def identify(cls, hash):
        if isinstance(hash, (str, bytes)):
            return True
        else:
            raise exc.ExpectedStringError(hash, "hash")

    @classmethod
    def verify(cls, secret, hash):
        secret = uh.validate_secret(secret)
        if isinstance(hash, str):
            hash = hash.encode(cls._hash_encoding, "surrogateescape")
        elif not isinstance(hash, bytes):
            raise exc.ExpectedStringError(hash, "hash")
        return consteq(secret, hash)

#=========================================================
#eof
#=========================================================
