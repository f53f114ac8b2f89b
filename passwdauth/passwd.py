"""passwdauth.passwd - authenticate against passwd / htpasswd style files"""
#=========================================================
#imports
#=========================================================
#core
from configparser import ConfigParser
import logging; log = logging.getLogger(__name__)
import os
from warnings import warn
#site
#libs
from passwdauth import exc, utils
from passwdauth.context import SchemeContext
from passwdauth.utils import splitcomma, is_ascii_codec
#pkg
#local
__all__ = [
    "PasswdFile",
]

#=========================================================
#helpers
#=========================================================
def _is_readable(path):
    "check if path is readable by the effective uid"
    if os.access in os.supports_effective_ids:
        return os.access(path, os.R_OK, effective_ids=True)
    return os.access(path, os.R_OK)

_true_set = set(["true", "t", "yes", "y", "on", "1", "enable", "enabled"])
_false_set = set(["false", "f", "no", "n", "off", "0", "disable", "disabled"])

def _parse_bool(value, param):
    "parse boolean config option"
    if isinstance(value, bool) or value is None:
        return value
    if not isinstance(value, str):
        raise ValueError("%s must be a boolean, not %r" % (param, value))
    value = value.strip().lower()
    if value in _true_set:
        return True
    if value in _false_set:
        return False
    raise ValueError("%s must be a boolean, not %r" % (param, value))

#: first characters of lines the record scan skips
_skip_chars = "# \t\r\n\f\v"

#=========================================================
#passwd file
#=========================================================
class PasswdFile(object):
    """authenticate users against a passwd file.

    Any file with records separated by newlines and fields separated by ``:``
    is supported: ``/etc/passwd``, ``.htpasswd`` files, etc.
    The first field is the username, the second the password,
    either plain or encoded by one of the schemes in :mod:`passwdauth.registry`.
    Anything after the second ``:`` is ignored. Lines starting with ``#``
    or with ascii whitespace are skipped.

    The file is re-read on every call, and never written to.

    :arg path:
        path to the passwd file (required)::

            PasswdFile("/etc/passwd")
            PasswdFile("/var/www/.htpasswd")

    :param flock:
        whether to hold a shared ``flock()`` on the file while reading it,
        so writers taking an exclusive lock are waited for.
        Defaults to ``True`` where the host supports ``flock()``.

    :param allow:
        list of scheme ids which may be used to verify passwords
        (eg ``["apr1", "md5", "sha"]``). Defaults to every known scheme.
        Unknown ids raise :exc:`ValueError`.

    :param fallback:
        set to ``False`` to never consult the untagged ``crypt`` and ``plain``
        schemes, even if listed in *allow*.

    :param encoding:
        encoding of the passwd file (``utf-8`` by default).
        must be compatible with 7-bit ascii.

    :param log:
        diagnostic sink. Any object with ``debug``, ``warning`` and ``error``
        methods accepting ``%``-style arguments, such as a
        :class:`logging.Logger`. Defaults to this module's logger.

    Authentication
    ==============
    .. automethod:: check
    .. automethod:: authenticate
    .. automethod:: locate

    Alternate Constructors
    ======================
    .. automethod:: from_string
    .. automethod:: from_path
    """
    #=========================================================
    #init
    #=========================================================
    def __init__(self, path, flock=None, allow=None, fallback=True,
                 encoding="utf-8", log=None):
        if not path:
            raise ValueError("no passwd file path specified")
        if not is_ascii_codec(encoding):
            raise ValueError("encoding must be 7-bit ascii compatible")

        flock = _parse_bool(flock, "flock")
        if flock is None:
            flock = utils.has_flock
        elif flock and not utils.has_flock:
            warn("flock() is not supported on this host, passwd file %r "
                 "will be read without locking" % (path,),
                 exc.PasswdAuthConfigWarning)
            flock = False

        self.path = path
        self.flock = flock
        self.encoding = encoding
        self.context = SchemeContext(allow, fallback=_parse_bool(fallback, "fallback"))
        if log is None:
            log = logging.getLogger(__name__)
        self.log = log

    @classmethod
    def from_path(cls, path, section="passwdauth", **kwds):
        """create new instance from specified section of an ini file.

        recognized options are ``passwd`` (required), ``flock``, ``allow``
        (comma separated), ``fallback`` and ``encoding``::

            [passwdauth]
            passwd = /var/www/.htpasswd
            allow = apr1, sha

        :param section: name of the ini section to read.
        :param \\*\\*kwds: override options from the file (eg ``log``).

        :raises EnvironmentError: if the ini file could not be read.
        """
        p = ConfigParser(interpolation=None)
        if not p.read([path]):
            raise EnvironmentError("failed to read config file: %r" % (path,))
        return cls._from_parser(p, section, kwds)

    @classmethod
    def from_string(cls, source, section="passwdauth", **kwds):
        """create new instance from specified section of an ini-formatted string.

        see :meth:`from_path` for the recognized options.
        """
        p = ConfigParser(interpolation=None)
        p.read_string(source)
        return cls._from_parser(p, section, kwds)

    @classmethod
    def _from_parser(cls, parser, section, kwds):
        options = dict(parser.items(section))
        if "passwd" not in options:
            raise KeyError("passwd option is required: [%s] section" % (section,))
        path = options.pop("passwd")
        if "allow" in options:
            options["allow"] = splitcomma(options["allow"])
        for key in options:
            if key not in ("flock", "allow", "fallback", "encoding"):
                raise KeyError("unknown option in [%s] section: %r" % (section, key))
        options.update(kwds)
        return cls(path, **options)

    def __repr__(self):
        return "<PasswdFile 0x%0x path=%r flock=%r schemes=%r>" % \
            (id(self), self.path, self.flock, self.context.schemes())

    #=========================================================
    #record locator
    #=========================================================
    def _norm_username(self, username):
        "decode bytes username using file encoding, or reject non-strings"
        if isinstance(username, bytes):
            return username.decode(self.encoding, "surrogateescape")
        if not isinstance(username, str):
            raise exc.ExpectedStringError(username, "username")
        return username

    def locate(self, username):
        """return encoded password of the first record matching username.

        Usernames starting with ``-`` never match, and don't touch the file.
        Bytes usernames are decoded using the file's encoding.

        :returns:
            the encoded password field, or ``None`` if no record matched.

        :raises TypeError: if username is not unicode or bytes.

        :raises passwdauth.exc.PasswdFileError:
            if the file is missing, not a file, unreadable,
            or could not be opened or locked.
        """
        log = self.log
        username = self._norm_username(username)
        if username.startswith("-"):
            log.debug("User '%s' begins with a hyphen which is not allowed.", username)
            return None

        path = self.path
        if not os.path.exists(path):
            raise exc.FileMissingError(path)
        if not os.path.isfile(path):
            raise exc.NotAFileError(path)
        if not _is_readable(path):
            raise exc.PermissionDeniedError(path)

        try:
            fh = open(path, "r", encoding=self.encoding, errors="surrogateescape")
        except EnvironmentError as err:
            raise exc.OpenFailedError(path, err.strerror or str(err))

        try:
            if self.flock:
                try:
                    utils.fcntl.flock(fh.fileno(), utils.fcntl.LOCK_SH)
                except EnvironmentError as err:
                    raise exc.LockFailedError(path, err.strerror or str(err))
            found, encoded = self._scan(fh, username)
        finally:
            # NOTE: closing also releases the lock
            try:
                fh.close()
            except EnvironmentError as err:
                log.warning("Failed to close passwd '%s'. Reason: '%s'", path, err)

        if found:
            log.debug("Found user '%s' in passwd '%s'.", username, path)
        if encoded is None:
            log.debug("User '%s' was not found in '%s'.", username, path)
        return encoded

    @staticmethod
    def _scan(lines, username):
        """scan lines for username, stopping at the first match.

        :returns: ``(found, encoded)`` tuple.
        """
        for line in lines:
            if line.endswith("\n"):
                line = line[:-1]
            # NOTE: only ascii whitespace marks a skipped line
            if not line or line[0] in _skip_chars:
                continue
            fields = line.split(":", 2)
            if fields[0] == username:
                if len(fields) < 2:
                    # record without a password field
                    return True, None
                return True, fields[1]
        return False, None

    #=========================================================
    #authenticator interface
    #=========================================================
    def check(self, username, password):
        """check username & password against the passwd file.

        Never raises: every failure (unknown user, wrong password,
        unreadable file, unrecognized hash, bad argument types)
        returns ``False``, with the reason reported to the diagnostic sink only.

        :returns: ``True`` if the password matches the user's record.
        """
        log = self.log
        try:
            username = self._norm_username(username)
        except TypeError as err:
            log.error("%s", err)
            return False

        try:
            encoded = self.locate(username)
        except exc.PasswdFileError as err:
            log.error("%s", err)
            return False
        except EnvironmentError as err:
            log.error("Failed to read passwd '%s'. Reason: '%s'", self.path, err)
            return False
        if encoded is None:
            return False

        # NOTE: custom handlers may raise from identify() as well as verify()
        try:
            scheme = self.context.identify(encoded)
            if scheme is None:
                log.debug("Failed to authenticate user '%s'. Reason: 'No allowed scheme "
                          "recognizes the password'", username)
                return False
            ok = self.context.verify(password, encoded)
        except (TypeError, ValueError) as err:
            log.debug("Failed to authenticate user '%s'. Reason: '%s'", username, err)
            return False
        if not ok:
            log.debug("Failed to authenticate user '%s'. Reason: 'Invalid credentials'",
                      username)
            return False

        log.debug("Successfully authenticated user '%s' (scheme %s).", username, scheme)
        return True

    #: alias for :meth:`check`, for callers expecting the adapter name
    authenticate = check

    #=========================================================
    #eoc
    #=========================================================

#=========================================================
#eof
#=========================================================
