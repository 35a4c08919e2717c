"""Text rendering of polynomials.

Each term is written as " + Cx^E" or " - Cx^E" (C is the absolute value of
the coefficient); zero terms are skipped.  Nothing is simplified: a unit
coefficient is still written and x^1 stays x^1.  An empty or all-zero
polynomial renders as the empty string.
"""

import sys

def format_term(term):
    c, e = term
    if c > 0:
        return " + {}x^{}".format(c, e)
    if c < 0:
        return " - {}x^{}".format(-c, e)
    return ""

def format_polynomial(p):
    parts = []
    p.for_each(lambda t: parts.append(format_term(t)))
    return "".join(parts)

def print_polynomial(p, prefix="", file=None):
    f = file or sys.stdout
    f.write(prefix)
    p.for_each(lambda t: f.write(format_term(t)))
    f.write("\n")
