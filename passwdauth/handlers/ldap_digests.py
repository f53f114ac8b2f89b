"""passwdauth.handlers.ldap_digests - ldap style digests, as accepted by htpasswd"""
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
    "ldap_sha1",
]

#=========================================================
#implementations
#=========================================================
#reference - http://www.openldap.org/doc/admin24/security.html

class ldap_sha1(uh.PasslibHandler):
    """This class verifies the LDAP SHA1 digest ``{SHA}<base64 digest>``,
    as written by ``htpasswd -s``.

    It has no salt, so identical passwords always produce identical hashes.
    """
    name = "ldap_sha1"
    ident = "{SHA}"
    backend = passlib.hash.ldap_sha1

#=========================================================
#eof
#=========================================================
