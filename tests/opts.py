import argparse
import unittest

from polylist import opts
from polylist import logging
from polylist import solver
from polylist.terms import overflow, int_width

class TestOpts(unittest.TestCase):

    def setUp(self):
        self.saved = opts.snapshot()

    def tearDown(self):
        opts.restore(self.saved)

    def parse(self, *argv):
        parser = argparse.ArgumentParser()
        opts.setup(parser)
        opts.read(parser.parse_args(list(argv)))

    def test_defaults(self):
        self.parse()
        self.assertEqual(overflow.value, "widen")
        self.assertEqual(int_width.value, 32)
        self.assertEqual(solver.timeout_opt.value, 0)
        self.assertEqual(logging.verbose.value, False)

    def test_command_line(self):
        self.parse("--overflow", "saturate", "--int-width", "16", "--verbose")
        self.assertEqual(overflow.value, "saturate")
        self.assertEqual(int_width.value, 16)
        self.assertEqual(logging.verbose.value, True)

    def test_command_line_rejects_bad_choice(self):
        with self.assertRaises(SystemExit):
            parser = argparse.ArgumentParser()
            opts.setup(parser)
            parser.parse_args(["--overflow", "sometimes"])

    def test_command_line_rejects_small_width(self):
        with self.assertRaises(ValueError):
            self.parse("--overflow", "wrap", "--int-width", "0")

    def test_set_rejects_bad_choice(self):
        with self.assertRaises(ValueError):
            overflow.set("sometimes")
        self.assertEqual(overflow.value, "widen")

    def test_snapshot_restore(self):
        snap = opts.snapshot()
        overflow.set("wrap")
        int_width.set(8)
        opts.restore(snap)
        self.assertEqual(overflow.value, "widen")
        self.assertEqual(int_width.value, 32)

    def test_not_a_boolean(self):
        with self.assertRaises(Exception):
            if logging.verbose:
                pass
