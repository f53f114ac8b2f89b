"""passwdauth.handlers.unix_crypt - hashes accepted by the unix crypt() call"""
#=========================================================
#imports
#=========================================================
#core
import logging; log = logging.getLogger(__name__)
import re
#site
import passlib.hash
#libs
from passwdauth import exc
import passwdauth.utils.handlers as uh
#pkg
#local
__all__ = [
    "des_crypt",
    "bsdi_crypt",
    "sha256_crypt",
    "sha512_crypt",
    "unix_crypt",
]

#=========================================================
#des based formats
#=========================================================
class des_crypt(uh.PasslibHandler):
    """This class verifies des-crypt hashes,
    the historical unix ``crypt()`` algorithm.

    Hashes are 13 characters: 2 chars of salt, 11 of checksum,
    all drawn from the regexp range ``[./0-9A-Za-z]``.
    Only the first 8 characters of a password are significant.
    """
    name = "des_crypt"
    backend = passlib.hash.des_crypt

    #FORMAT: 2 chars of H64-encoded salt + 11 chars of H64-encoded checksum
    _hash_regex = re.compile(r"^[./a-z0-9]{13}$", re.I)

class bsdi_crypt(uh.PasslibHandler):
    """This class verifies BSDi-Crypt hashes,
    also known as extended DES crypt.

    Hashes are 20 characters: ``_`` followed by 4 chars of rounds,
    4 chars of salt and 11 chars of checksum, all drawn from the regexp
    range ``[./0-9A-Za-z]``. Unlike :class:`des_crypt`,
    every character of the password is significant.
    """
    name = "bsdi_crypt"
    ident = "_"
    backend = passlib.hash.bsdi_crypt

    #FORMAT: "_" + 4 chars of H64 rounds + 4 chars of H64 salt + 11 chars of H64 checksum
    _hash_regex = re.compile(r"^_[./a-z0-9]{19}$", re.I)

#=========================================================
#sha2 based formats
#=========================================================
class sha256_crypt(uh.PasslibHandler):
    """This class verifies SHA256-Crypt hashes (``$5$``),
    as found in Linux shadow files.
    """
    name = "sha256_crypt"
    ident = "$5$"
    backend = passlib.hash.sha256_crypt

class sha512_crypt(uh.PasslibHandler):
    """This class verifies SHA512-Crypt hashes (``$6$``),
    the default scheme of most current Linux distributions.
    """
    name = "sha512_crypt"
    ident = "$6$"
    backend = passlib.hash.sha512_crypt

#=========================================================
#unix crypt() fallback
#=========================================================
class unix_crypt(object):
    """This class verifies hashes the way a unix ``crypt()`` call would.

    It accepts the DES based formats, which carry no ``$id$`` prefix,
    and the sha2 based ``$5$`` and ``$6$`` formats of glibc's ``crypt()``.
    The ``$1$`` md5-crypt format is left to its own scheme,
    so an allow-list without ``md5`` really excludes it.

    It recognizes des-crypt hashes by their structure alone, so it is an
    *untagged* scheme: a plaintext password which happens to look like
    a des-crypt hash will be claimed by this handler.
    """
    name = "unix_crypt"
    ident = None

    #: handlers tried in order, first one to identify the hash wins
    handlers = (sha512_crypt, sha256_crypt, bsdi_crypt, des_crypt)

    @classmethod
    def _find_handler(cls, hash):
        for handler in cls.handlers:
            if handler.identify(hash):
                return handler
        return None

    @classmethod
    def identify(cls, hash):
        return cls._find_handler(hash) is not None

    @classmethod
    def verify(cls, secret, hash):
        handler = cls._find_handler(hash)
        if handler is None:
            raise exc.InvalidHashError(cls)
        return handler.verify(secret, hash)

#=========================================================
#eof
#=========================================================
