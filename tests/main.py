import contextlib
import io
import os
import tempfile
import unittest

from polylist import opts
from polylist.main import run, sample

class TestMain(unittest.TestCase):

    def setUp(self):
        self.saved = opts.snapshot()

    def tearDown(self):
        opts.restore(self.saved)

    def run_main(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            self.assertEqual(run(list(argv)), 0)
        return out.getvalue()

    def test_sample(self):
        self.assertEqual(list(sample(3)), [(1, 1), (2, 2), (3, 3)])
        assert sample(0).is_empty()

    def test_default_is_multiply(self):
        self.assertEqual(self.run_main(),
            "list1:  + 1x^1 + 2x^2\n"
            "list2:  + 1x^1 + 2x^2 + 3x^3\n"
            "new:  + 1x^2 + 2x^3 + 3x^4 + 2x^3 + 4x^4 + 6x^5\n")

    def test_merge(self):
        out = self.run_main("--merge")
        assert out.endswith("new:  + 1x^2 + 4x^3 + 7x^4 + 6x^5\n")

    def test_add(self):
        out = self.run_main("--op", "add")
        assert out.endswith("new:  + 1x^1 + 2x^2 + 1x^1 + 2x^2 + 3x^3\n")

    def test_subtract_merge_prune(self):
        out = self.run_main("--op", "subtract", "--merge", "--prune-zeros")
        assert out.endswith("new:  - 3x^3\n")

    def test_sizes(self):
        out = self.run_main("--op", "add", "--first", "1", "--second", "0")
        self.assertEqual(out, "list1:  + 1x^1\nlist2: \nnew:  + 1x^1\n")

    def test_verify(self):
        out = self.run_main("--merge", "--prune-zeros", "--verify")
        assert out.endswith("verified: yes\n")

    def test_verbose(self):
        out = self.run_main("--merge", "--verbose")
        assert "multiply [lhs=2, rhs=3]..." in out
        assert "Finished merge" in out
        assert "merged 1 term(s) into x^3" in out

    def test_profile(self):
        fd, path = tempfile.mkstemp(text=True)
        os.close(fd)
        try:
            self.run_main("--profile", "--profile-path", path)
            with open(path) as f:
                contents = f.read()
            assert contents.startswith("Total duration:")
            assert "multiply" in contents
        finally:
            os.remove(path)
