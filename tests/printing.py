import io
import unittest

from polylist.algebra import add
from polylist.polynomial import Polynomial
from polylist.printing import format_term, format_polynomial, print_polynomial
from polylist.terms import Term

class TestPrinting(unittest.TestCase):

    def test_format_term(self):
        self.assertEqual(format_term(Term(2, 3)), " + 2x^3")
        self.assertEqual(format_term(Term(-4, 0)), " - 4x^0")
        self.assertEqual(format_term(Term(1, 1)), " + 1x^1")
        self.assertEqual(format_term(Term(0, 9)), "")

    def test_format_sum(self):
        p1 = Polynomial([(1, 1), (2, 2)])
        p2 = Polynomial([(1, 1), (2, 2), (3, 3)])
        self.assertEqual(format_polynomial(add(p1, p2)), " + 1x^1 + 2x^2 + 1x^1 + 2x^2 + 3x^3")

    def test_zero_terms_vanish(self):
        p = Polynomial([(0, 1), (-3, 2), (0, 0), (5, 4)])
        self.assertEqual(format_polynomial(p), " - 3x^2 + 5x^4")
        self.assertEqual(str(p), " - 3x^2 + 5x^4")

    def test_empty(self):
        self.assertEqual(format_polynomial(Polynomial()), "")
        self.assertEqual(format_polynomial(Polynomial([(0, 3)])), "")

    def test_print_polynomial(self):
        out = io.StringIO()
        print_polynomial(Polynomial([(1, 1), (-2, 2)]), prefix="list1: ", file=out)
        print_polynomial(Polynomial(), file=out)
        self.assertEqual(out.getvalue(), "list1:  + 1x^1 - 2x^2\n\n")
