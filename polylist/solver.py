"""Symbolic equivalence of polynomials using Z3.

Important functions:
 - equivalent: decide whether two polynomials agree at every point
 - difference_witness: find a point where two polynomials disagree

Polynomials are encoded over a real-valued variable.  Two polynomials with
integer coefficients agree on every real iff they agree on every integer
(a nonzero polynomial has finitely many roots), and nonlinear real
arithmetic is decidable, so Z3 should never answer unknown here except on a
timeout.
"""

from fractions import Fraction

import z3

from polylist.logging import task
from polylist.opts import Option

timeout_opt = Option("solver-timeout", int, 0, metavar="MS",
    description="Milliseconds Z3 may spend on one query (0 means no limit)")

class SolverReportedUnknown(Exception):
    pass

def _power(x, e, ctx):
    res = z3.RealVal(1, ctx)
    for _ in range(e):
        res = res * x
    return res

def to_z3(p, x, ctx):
    """The Z3 expression for p with variable x."""
    res = z3.RealVal(0, ctx)
    for t in p:
        res = res + z3.RealVal(t.coefficient, ctx) * _power(x, t.exponent, ctx)
    return res

def _solve_difference(p1, p2, timeout):
    ctx = z3.Context()
    solver = z3.Solver(ctx=ctx)
    if timeout is None:
        timeout = timeout_opt.value
    if timeout:
        solver.set("timeout", int(timeout))
    x = z3.Real("x", ctx)
    solver.add(to_z3(p1, x, ctx) != to_z3(p2, x, ctx))
    with task("invoke Z3", lhs=len(p1), rhs=len(p2)):
        res = solver.check()
    if res == z3.unsat:
        return None
    if res == z3.unknown:
        raise SolverReportedUnknown("z3 reported unknown: {}".format(solver.reason_unknown()))
    return solver.model().eval(x, model_completion=True)

def difference_witness(p1, p2, timeout=None):
    """A point where p1 and p2 differ, or None if they are equivalent.

    The point is returned as a Fraction; Z3 may pick a non-integer one.
    """
    val = _solve_difference(p1, p2, timeout)
    if val is None:
        return None
    if z3.is_algebraic_value(val):
        # irrational; report a 20-digit rational approximation
        val = val.approx(20)
    return Fraction(val.as_fraction())

def equivalent(p1, p2, timeout=None):
    """True iff p1 and p2 denote the same polynomial function.

    Term order, duplicate exponents and zero terms do not matter, so a
    polynomial is always equivalent to a merged copy of itself.
    """
    return _solve_difference(p1, p2, timeout) is None
