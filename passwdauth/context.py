"""passwdauth.context - SchemeContext class, for verifying against an allow-list of schemes"""
#=========================================================
#imports
#=========================================================
#core
import logging; log = logging.getLogger(__name__)
#site
#libs
from passwdauth.registry import get_scheme_handler, list_scheme_handlers
from passwdauth.utils import splitcomma
#pkg
#local
__all__ = [
    "SchemeContext",
]

#=========================================================
#context
#=========================================================
class SchemeContext(object):
    """Verifies passwords against hashes produced by any of a list of schemes.

    :param schemes:
        ordered allow-list of scheme ids (or a comma separated string of them).
        If ``None`` (the default), every scheme known to
        :mod:`passwdauth.registry` is allowed.
        Unknown ids cause a :exc:`ValueError`.

    :param fallback:
        If ``True`` (the default), *untagged* schemes in the allow-list
        (``crypt``, ``plain``) are consulted when no tagged scheme claims a hash.
        If ``False``, they are dropped, so only hashes carrying an unambiguous
        prefix can ever verify.

    Dispatch
    ========
    Tagged schemes (those whose handler has an ``ident`` prefix) are consulted
    first, in allow-list order; untagged ones only afterwards, with any scheme
    that accepts all hashes (``plain``) last. The first handler whose
    ``identify()`` accepts the hash decides the result; no other scheme is tried
    after it. Schemes missing from the allow-list are never consulted,
    even when their prefix matches.

    .. automethod:: verify
    .. automethod:: identify
    """
    #=========================================================
    #init
    #=========================================================
    def __init__(self, schemes=None, fallback=True):
        if schemes is None:
            schemes = list_scheme_handlers()
        elif isinstance(schemes, str):
            schemes = splitcomma(schemes)

        records = []
        seen = set()
        for scheme in schemes:
            if scheme in seen:
                raise ValueError("scheme listed twice in allow-list: %r" % (scheme,))
            seen.add(scheme)
            handler = get_scheme_handler(scheme, None)
            if handler is None:
                raise ValueError("unknown scheme in allow-list: %r" % (scheme,))
            records.append((scheme, handler))

        tagged = [rec for rec in records if rec[1].ident]
        untagged = [rec for rec in records if not rec[1].ident]
        if fallback:
            # stable sort, so catch-all schemes end up last
            untagged.sort(key=lambda rec: bool(getattr(rec[1], "accepts_all_hashes", False)))
        else:
            if untagged:
                log.debug("untagged fallback disabled, ignoring schemes: %r",
                          [rec[0] for rec in untagged])
            untagged = []

        self.fallback = fallback
        self._records = tuple(tagged + untagged)

    def __repr__(self):
        return "<SchemeContext 0x%0x schemes=%r>" % (id(self), self.schemes())

    #=========================================================
    #inspection
    #=========================================================
    def schemes(self, resolve=False):
        """return tuple of schemes this context will consult, in dispatch order.

        :param resolve: if ``True``, returns handlers instead of scheme ids.
        """
        if resolve:
            return tuple(rec[1] for rec in self._records)
        return tuple(rec[0] for rec in self._records)

    #=========================================================
    #main interface
    #=========================================================
    def _identify_record(self, hash):
        for record in self._records:
            if record[1].identify(hash):
                return record
        return None

    def identify(self, hash, resolve=False):
        """Attempt to identify which allowed scheme produced a hash.

        :arg hash: the hash string to test.

        :param resolve:
            If ``True``, returns the handler itself,
            instead of the scheme id.

        :returns:
            The scheme id of the first handler to claim the hash,
            or ``None`` if no allowed scheme claims it.
        """
        record = self._identify_record(hash)
        if record is None:
            return None
        elif resolve:
            return record[1]
        else:
            return record[0]

    def verify(self, secret, hash):
        """verify secret against an existing hash.

        The hash is handed to the first allowed scheme that identifies it,
        and that scheme alone decides the result.

        :arg secret: the password, as unicode or bytes.
        :arg hash: the encoded password field to check against.

        :raises ValueError:
            if the deciding handler finds the hash malformed,
            or the secret is too large.

        :raises TypeError:
            if secret or hash are not strings.

        :returns:
            ``True`` if the password matches, ``False`` if it doesn't,
            or if no allowed scheme recognizes the hash.
        """
        record = self._identify_record(hash)
        if record is None:
            log.debug("no allowed scheme recognizes hash")
            return False
        return bool(record[1].verify(secret, hash))

    #=========================================================
    #eoc
    #=========================================================

#=========================================================
#eof
#=========================================================
