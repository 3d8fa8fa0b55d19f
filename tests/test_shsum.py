import contextlib
import hashlib
import io
import os
import shutil
import sys
import tempfile
import unittest
from unittest import mock

import SHS
from SHS.Utilities import shsum

class TestShsum(unittest.TestCase):
    def setUp(self):
        self.saved = (SHS.loglevel, SHS.logdest, SHS.logfile, SHS.compact_log_fmt)
        self.tmpdir = tempfile.mkdtemp()
        self.path = os.path.join(self.tmpdir, "data.bin")
        self.data = bytes(range(256))*5
        with open(self.path, "wb") as fh:
            fh.write(self.data)

    def tearDown(self):
        SHS.loglevel, SHS.logdest, SHS.logfile, SHS.compact_log_fmt = self.saved
        shutil.rmtree(self.tmpdir)

    def run_main(self, *args):
        out = io.StringIO()
        with mock.patch.object(sys, "argv", ["shsum"]+list(args)):
            with contextlib.redirect_stdout(out):
                with self.assertRaises(SystemExit) as cm:
                    shsum.main()

        return cm.exception.code, out.getvalue()

    def test_default_sha256(self):
        code, out = self.run_main("-q", self.path)
        self.assertEqual(code, shsum.EXIT_OK)
        self.assertEqual(out, hashlib.sha256(self.data).hexdigest()+"  "+self.path+"\n")

    def test_sha1(self):
        code, out = self.run_main("-q", "-a", "sha1", self.path)
        self.assertEqual(code, shsum.EXIT_OK)
        self.assertIn(hashlib.sha1(self.data).hexdigest(), out)

    def test_chunked_reads(self):
        with mock.patch.object(shsum, "CHUNK_SIZE", 100):
            code, out = self.run_main("-q", self.path)
        self.assertEqual(code, shsum.EXIT_OK)
        self.assertIn(hashlib.sha256(self.data).hexdigest(), out)

    def test_missing_file(self):
        missing = os.path.join(self.tmpdir, "missing.bin")
        code, out = self.run_main(missing, self.path)
        self.assertEqual(code, shsum.EXIT_FILE_ERROR)
        self.assertIn("not found", out)
        self.assertIn(hashlib.sha256(self.data).hexdigest(), out)

    def test_logfile(self):
        logpath = os.path.join(self.tmpdir, "shsum.log")
        missing = os.path.join(self.tmpdir, "missing.bin")
        code, out = self.run_main("--logfile", logpath, missing)
        self.assertEqual(code, shsum.EXIT_FILE_ERROR)
        self.assertEqual(out, "")
        with open(logpath, "r") as fh:
            self.assertIn("missing.bin not found", fh.read())

    def test_self_test(self):
        code, out = self.run_main("--self-test")
        self.assertEqual(code, shsum.EXIT_OK)
        self.assertIn("Self-test passed", out)

    def test_check(self):
        code, out = self.run_main("-q", "-c", self.path)
        if SHS.Provider.has_reference():
            self.assertEqual(code, shsum.EXIT_OK)
            self.assertIn(hashlib.sha256(self.data).hexdigest(), out)
        else:
            self.assertEqual(code, shsum.EXIT_NO_REFERENCE)

    def test_check_mismatch(self):
        reference = mock.Mock()
        reference.finalize.return_value = b"\x00"*32
        with mock.patch.object(SHS.Provider, "has_reference", return_value=True):
            with mock.patch.object(SHS.Provider, "reference_new", return_value=reference):
                code, out = self.run_main("-q", "-c", self.path)

        self.assertEqual(code, shsum.EXIT_MISMATCH)
        self.assertIn(hashlib.sha256(self.data).hexdigest(), out)
        self.assertIn("does not match reference provider", out)
        reference.update.assert_called_with(self.data)

    def test_self_test_failure(self):
        with mock.patch.dict(SHS.Provider.VECTORS, {"sha1": [(b"abc", "00"*20)]}):
            code, out = self.run_main("--self-test")

        self.assertEqual(code, shsum.EXIT_SELFTEST_FAIL)
        self.assertIn("Self-test failed", out)

    def test_unexpected_error(self):
        with mock.patch.object(shsum, "hash_file", side_effect=RuntimeError("disk on fire")):
            code, out = self.run_main(self.path)

        self.assertEqual(code, shsum.EXIT_INTERNAL)
        self.assertIn("disk on fire", out)
        self.assertIn("Traceback", out)

    def test_version(self):
        code, out = self.run_main("--version")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "shsum "+SHS.version())

    def test_hash_stream(self):
        digest, total = shsum.hash_stream(SHS.SHA1, io.BytesIO(self.data))
        self.assertEqual(total, len(self.data))
        self.assertEqual(digest, hashlib.sha1(self.data).digest())


if __name__ == '__main__':
    unittest.main(verbosity=2)
