"""helpers for passwdauth unittests"""
#=========================================================
#imports
#=========================================================
#core
import atexit
import logging; log = logging.getLogger(__name__)
import os
import tempfile
import unittest
import warnings
#site
#pkg
#local
__all__ = [
    #util funcs
    'set_file', 'get_file',
    'mktemp', 'mkdtemp',

    #unit testing
    'TestCase',
    'HandlerCase',
    'RecordingSink',

    #test data
    'UPASS_TABLE',
]

#: unicode password used to check non-ascii handling
UPASS_TABLE = "táБℓə"

#=========================================================
#misc utility funcs
#=========================================================
def set_file(path, content):
    "set file to specified bytes"
    if isinstance(content, str):
        content = content.encode("utf-8")
    with open(path, "wb") as fh:
        fh.write(content)

def get_file(path):
    "read file as bytes"
    with open(path, "rb") as fh:
        return fh.read()

#=========================================================
#custom test base
#=========================================================
class TestCase(unittest.TestCase):
    """passwdauth-specific test case class

    this class adds a number of features to the standard TestCase...
    * common prefix for all test descriptions
    * resets warnings filter for every test
    * tweaks to message formatting
    """
    #----------------------------------------------------------------
    # make it easy for test cases to add common prefix to shortDescription
    #----------------------------------------------------------------

    # string prepended to all tests in TestCase
    descriptionPrefix = None

    def shortDescription(self):
        "wrap shortDescription() method to prepend descriptionPrefix"
        desc = super(TestCase, self).shortDescription()
        prefix = self.descriptionPrefix
        if prefix:
            desc = "%s: %s" % (prefix, desc or str(self))
        return desc

    #----------------------------------------------------------------
    # reset warning filters before each test
    #----------------------------------------------------------------

    # flag to enable this feature
    resetWarningState = True

    def setUp(self):
        super(TestCase, self).setUp()
        if self.resetWarningState:
            ctx = warnings.catch_warnings()
            ctx.__enter__()
            self.addCleanup(ctx.__exit__, None, None, None)
            warnings.resetwarnings()

    #----------------------------------------------------------------
    # tweak message formatting so longMessage mode is only enabled
    # if msg ends with ":", and turn on longMessage by default.
    #----------------------------------------------------------------
    longMessage = True

    def _formatMessage(self, msg, std):
        if self.longMessage and msg and msg.rstrip().endswith(":"):
            return '%s %s' % (msg.rstrip(), std)
        else:
            return msg or std

#=========================================================
#handler test base
#=========================================================
class HandlerCase(TestCase):
    """base class for testing scheme handlers.

    subclasses set :attr:`handler` and fill in the known hash lists,
    this class is skipped since it has no handler.
    """
    #: handler to test
    handler = None

    #: list of (secret, hash) pairs which should verify
    known_correct_hashes = []

    #: hashes handler should identify, but reject as malformed
    known_malformed_hashes = []

    #: hashes handler should not identify
    known_unidentified_hashes = []

    #: passwords that should never match any known hash
    wrong_secrets = ["stub", "wrong password"]

    @property
    def descriptionPrefix(self):
        handler = self.handler
        return handler.name if handler else None

    def setUp(self):
        if self.handler is None:
            self.skipTest("no handler specified")
        super(HandlerCase, self).setUp()

    def test_01_identify(self):
        "test identify() accepts known hashes"
        for secret, hash in self.known_correct_hashes:
            self.assertTrue(self.handler.identify(hash), "hash=%r:" % (hash,))
        for hash in self.known_malformed_hashes:
            self.assertTrue(self.handler.identify(hash), "hash=%r:" % (hash,))

    def test_02_identify_unknown(self):
        "test identify() rejects foreign hashes"
        for hash in self.known_unidentified_hashes:
            self.assertFalse(self.handler.identify(hash), "hash=%r:" % (hash,))

    def test_03_verify_correct(self):
        "test verify() against known hashes"
        for secret, hash in self.known_correct_hashes:
            self.assertTrue(self.handler.verify(secret, hash),
                            "secret=%r hash=%r:" % (secret, hash))

    def test_04_verify_wrong(self):
        "test verify() rejects wrong passwords"
        for secret, hash in self.known_correct_hashes:
            for other in self.wrong_secrets:
                if other == secret:
                    continue
                self.assertFalse(self.handler.verify(other, hash),
                                 "secret=%r hash=%r:" % (other, hash))

    def test_05_verify_malformed(self):
        "test verify() throws ValueError for malformed hashes"
        for hash in self.known_malformed_hashes:
            self.assertRaises(ValueError, self.handler.verify, "stub", hash)

    def test_06_verify_bytes(self):
        "test verify() accepts bytes secrets & hashes"
        for secret, hash in self.known_correct_hashes:
            if isinstance(secret, str):
                secret = secret.encode("utf-8")
            self.assertTrue(self.handler.verify(secret, hash.encode("utf-8")))

    def test_07_secret_type(self):
        "test verify() throws TypeError for non-string secrets"
        secret, hash = self.known_correct_hashes[0]
        self.assertRaises(TypeError, self.handler.verify, None, hash)
        self.assertRaises(TypeError, self.handler.verify, 1, hash)

#=========================================================
#diagnostic sink which records events
#=========================================================
class RecordingSink(object):
    """stand-in for a logger, records ``(level, message)`` tuples.

    messages are rendered with ``%``-style args, the same as :mod:`logging`.
    """
    def __init__(self):
        self.events = []

    def _record(self, level, msg, *args):
        if args:
            msg = msg % args
        self.events.append((level, msg))

    def debug(self, msg, *args):
        self._record("debug", msg, *args)

    def warning(self, msg, *args):
        self._record("warning", msg, *args)

    def error(self, msg, *args):
        self._record("error", msg, *args)

    def levels(self):
        "return list of levels recorded"
        return [level for level, _ in self.events]

    def messages(self, level=None):
        "return list of messages recorded, optionally filtered by level"
        return [msg for lv, msg in self.events if level is None or lv == level]

#=========================================================
#helper for creating temp files - all cleaned up when prog exits
#=========================================================
tmp_files = []

def _clean_tmp_files():
    for path in tmp_files:
        if os.path.isdir(path):
            os.rmdir(path)
        elif os.path.exists(path):
            os.remove(path)
atexit.register(_clean_tmp_files)

def mktemp(*args, **kwds):
    fd, path = tempfile.mkstemp(*args, **kwds)
    tmp_files.append(path)
    os.close(fd)
    return path

def mkdtemp(*args, **kwds):
    path = tempfile.mkdtemp(*args, **kwds)
    tmp_files.append(path)
    return path

#=========================================================
#EOF
#=========================================================
