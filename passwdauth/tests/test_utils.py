"""tests for passwdauth.util"""
#=========================================================
#imports
#=========================================================
#core
import logging; log = logging.getLogger(__name__)
#site
#pkg
from passwdauth.tests.utils import TestCase
#module

#=========================================================
#byte/unicode helpers
#=========================================================
class MiscTest(TestCase):
    "tests various parts of utils module"
    descriptionPrefix = "passwdauth.utils"

    def test_consteq(self):
        "test consteq()"
        from passwdauth.utils import consteq

        # check equal inputs compare correctly
        for value in [
                "a",
                "abc",
                "\xff\xa2\x12\x00"*10,
            ]:
            self.assertTrue(consteq(value, value[:]), "value %r:" % (value,))
            self.assertTrue(consteq(value.encode("latin-1"), value.encode("latin-1")),
                            "value %r:" % (value,))

        # check non-equal inputs compare correctly
        for l, r in [
                # check same-size comparisons with differing contents fail.
                ("a", "c"),
                ("abcabc", "zbaabc"),
                ("abcabc", "abzabc"),
                ("abcabc", "abcabz"),
                (("\xff\xa2\x12\x00"*10)[:-1] + "\x01",
                    "\xff\xa2\x12\x00"*10),

                # check different-size comparisons fail.
                ("", "a"),
                ("abc", "abcdef"),
                ("abc", "defabc"),
                ("qwertyuiopasdfghjklzxcvbnm", "abc"),
            ]:
            self.assertFalse(consteq(l, r), "values %r %r:" % (l, r))
            self.assertFalse(consteq(r, l), "values %r %r:" % (r, l))
            self.assertFalse(consteq(l.encode("latin-1"), r.encode("latin-1")),
                             "values %r %r:" % (l, r))

        # check empty strings
        self.assertTrue(consteq("", ""))
        self.assertTrue(consteq(b"", b""))

        # check mixed / bad types
        self.assertRaises(TypeError, consteq, "abc", b"abc")
        self.assertRaises(TypeError, consteq, b"abc", "abc")
        self.assertRaises(TypeError, consteq, None, "abc")
        self.assertRaises(TypeError, consteq, 1, 1)

    def test_splitcomma(self):
        "test splitcomma()"
        from passwdauth.utils import splitcomma
        self.assertEqual(splitcomma("apr1, md5,sha"), ["apr1", "md5", "sha"])
        self.assertEqual(splitcomma(" apr1 ,, "), ["apr1"])
        self.assertEqual(splitcomma(""), [])

    def test_to_bytes(self):
        "test to_bytes()"
        from passwdauth.utils import to_bytes
        self.assertEqual(to_bytes("abc"), b"abc")
        self.assertEqual(to_bytes("á"), b"\xc3\xa1")
        self.assertEqual(to_bytes("á", "latin-1"), b"\xe1")
        self.assertEqual(to_bytes(b"\xff"), b"\xff")
        self.assertRaises(TypeError, to_bytes, None)

    def test_is_ascii_codec(self):
        "test is_ascii_codec()"
        from passwdauth.utils import is_ascii_codec
        self.assertTrue(is_ascii_codec("utf-8"))
        self.assertTrue(is_ascii_codec("latin-1"))
        self.assertTrue(is_ascii_codec("ascii"))
        self.assertFalse(is_ascii_codec("utf-16"))
        self.assertFalse(is_ascii_codec("utf-32-be"))

#=========================================================
#EOF
#=========================================================
