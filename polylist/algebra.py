"""Polynomial arithmetic.

`add`, `subtract` and `multiply` read their operands and return a new
Polynomial with freshly allocated nodes.  None of them combines like terms:
the result of `add` is the two operands laid end to end, and `multiply`
produces one term per pair of operand terms.  Call `merge` on the result to
get one term per exponent.

Coefficient arithmetic follows the `overflow` option (see polylist.terms).
"""

from contextlib import contextmanager

from polylist.logging import task, event
from polylist.polynomial import Polynomial, HEAD

@contextmanager
def _result():
    new = Polynomial()
    try:
        yield new
    except Exception:
        new.clean()
        raise

def add(p1, p2):
    with task("add", lhs=len(p1), rhs=len(p2)), _result() as new:
        for t in p1:
            new.append(t)
        for t in p2:
            new.append(t)
    return new

def subtract(p1, p2):
    with task("subtract", lhs=len(p1), rhs=len(p2)), _result() as new:
        for t in p1:
            new.append(t)
        for t in p2:
            new.append(t.negated())
    return new

def multiply(p1, p2):
    """One term per (t1, t2) pair, outer loop over p1."""
    with task("multiply", lhs=len(p1), rhs=len(p2)), _result() as new:
        for t1 in p1:
            for t2 in p2:
                new.append(t1.times(t2))
    return new

def merge(p):
    """Combine terms that share an exponent, in place.

    Each term absorbs every later term with the same exponent; absorbed
    nodes are deleted.  Surviving terms keep their relative order and the
    combined term sits where its exponent first appeared.  Terms whose
    coefficients cancel to zero are kept (see `prune_zeros`).

    Returns p.
    """
    with task("merge", terms=len(p)):
        i = p.first()
        while i is not None:
            combined = p.term(i)
            count = 0
            prev = i
            j = p.next(prev)
            while j is not None:
                if j.term.exponent == combined.exponent:
                    combined = combined.absorb(p.delete_next(prev))
                    count += 1
                else:
                    prev = j
                j = p.next(prev)
            if count:
                p.replace(i, combined)
                event("merged {} term(s) into x^{}".format(count, combined.exponent))
            i = p.next(i)
    return p

def prune_zeros(p):
    """Delete every term with a zero coefficient, in place.  Returns p."""
    with task("prune_zeros", terms=len(p)):
        removed = 0
        prev = HEAD
        j = p.next(prev)
        while j is not None:
            if j.term.coefficient == 0:
                p.delete_next(prev)
                removed += 1
            else:
                prev = j
            j = p.next(prev)
        if removed:
            event("pruned {} zero term(s)".format(removed))
    return p

def evaluate(p, x):
    """The value of p at x, computed without overflow."""
    return sum(t.at(x) for t in p)
