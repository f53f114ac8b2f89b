"""passwdauth.exc -- exceptions & warnings raised by passwdauth"""
import os

#==========================================================================
# exceptions
#==========================================================================
class PasswdFileError(EnvironmentError):
    """Base class for errors raised while locating a record in a passwd file.

    :attr path: path of the passwd file.
    :attr reason: OS supplied reason, if any.

    These never escape :meth:`~passwdauth.passwd.PasswdFile.check`,
    which reports them to its diagnostic sink and returns ``False``.
    They are raised by :meth:`~passwdauth.passwd.PasswdFile.locate`.
    """
    #: message template, formatted with path, reason & euid
    template = "passwd file %(path)r could not be read"

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        EnvironmentError.__init__(self, self._render())

    def _render(self):
        return self.template % dict(path=self.path, reason=self.reason,
                                    euid=getattr(os, "geteuid", lambda: None)())

class FileMissingError(PasswdFileError):
    "passwd file does not exist"
    template = "passwd file %(path)r does not exist."

class NotAFileError(PasswdFileError):
    "passwd path exists, but is not a regular file"
    template = "passwd file %(path)r is not a file."

class PermissionDeniedError(PasswdFileError):
    "passwd file is not readable by the effective uid"
    template = "passwd file %(path)r is not readable by effective uid %(euid)r."

class OpenFailedError(PasswdFileError):
    "opening the passwd file failed"
    template = "Failed to open passwd %(path)r. Reason: %(reason)r"

class LockFailedError(PasswdFileError):
    "obtaining a shared lock on the passwd file failed"
    template = "Failed to obtain a shared lock on %(path)r. Reason: %(reason)r"

class PasswordSizeError(ValueError):
    """Error raised if the password provided exceeds the limit set by passwdauth.

    Hash algorithms take time proportional to the size of the password,
    so an arbitrarily large password offered by a remote client could
    be used to tie up the server. passwdauth therefore rejects passwords
    larger than :data:`~passwdauth.utils.MAX_PASSWORD_SIZE` (4096 by default;
    set ``PASSWDAUTH_MAX_PASSWORD_SIZE`` before import to change it).
    """
    def __init__(self):
        ValueError.__init__(self, "password exceeds maximum allowed size")

#==========================================================================
# warnings
#==========================================================================
class PasswdAuthWarning(UserWarning):
    """base class for passwdauth's user warnings"""

class PasswdAuthConfigWarning(PasswdAuthWarning):
    """Warning issued when a non-fatal issue is found in the configuration
    of a :class:`~passwdauth.passwd.PasswdFile`; for instance, locking
    was requested on a host that has no ``flock()``.
    """

#==========================================================================
# error constructors
#
# note: these functions return plain TypeError / ValueError instances,
# callers catching ValueError don't need to import anything from here.
#==========================================================================

def _get_name(handler):
    return handler.name if handler else "<unnamed>"

def type_name(value):
    "return pretty-printed string containing name of value's type"
    cls = value.__class__
    if cls.__module__ and cls.__module__ not in ["__builtin__", "builtins"]:
        return "%s.%s" % (cls.__module__, cls.__name__)
    elif value is None:
        return 'None'
    else:
        return cls.__name__

def ExpectedTypeError(value, expected, param):
    "error message when param was supposed to be one type, but found another"
    # NOTE: value is never displayed, since it may sometimes be a password.
    name = type_name(value)
    return TypeError("%s must be %s, not %s" % (param, expected, name))

def ExpectedStringError(value, param):
    "error message when param was supposed to be unicode or bytes"
    return ExpectedTypeError(value, "unicode or bytes", param)

def InvalidHashError(handler=None):
    "error raised if unrecognized hash provided to handler"
    return ValueError("not a valid %s hash" % _get_name(handler))

def MalformedHashError(handler=None, reason=None):
    "error raised if recognized-but-malformed hash provided to handler"
    text = "malformed %s hash" % _get_name(handler)
    if reason:
        text = "%s (%s)" % (text, reason)
    return ValueError(text)

#==========================================================================
# eof
#==========================================================================
