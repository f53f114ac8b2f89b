"""passwdauth.handlers.md5_crypt - md5-crypt algorithm & apache variant"""
#=========================================================
#imports
#=========================================================
#core
import logging; log = logging.getLogger(__name__)
#site
import passlib.hash
#libs
import passwdauth.utils.handlers as uh
#pkg
#local
__all__ = [
    "md5_crypt",
    "apr_md5_crypt",
]

#=========================================================
#handlers
#=========================================================
class md5_crypt(uh.PasslibHandler):
    """This class verifies MD5-Crypt password hashes (``$1$``),
    as found in BSD & Linux shadow files.

    The salt is 0-8 characters from the regexp range ``[./0-9A-Za-z]``,
    followed by ``$`` and a 22 character checksum.
    """
    name = "md5_crypt"
    ident = "$1$"
    backend = passlib.hash.md5_crypt

class apr_md5_crypt(uh.PasslibHandler):
    """This class verifies Apr-MD5-Crypt password hashes (``$apr1$``),
    the default scheme of Apache's ``htpasswd`` tool.

    It only differs from :class:`md5_crypt` by the magic string
    mixed into the digest, so the two never verify each other's hashes.
    """
    name = "apr_md5_crypt"
    ident = "$apr1$"
    backend = passlib.hash.apr_md5_crypt

#=========================================================
#eof
#=========================================================
