#!/usr/bin/env python

"""
Demo driver: builds two sample polynomials, combines them, prints all three.
Run with --help for options.
"""

import argparse

from polylist import algebra
from polylist import opts
from polylist import logging
from polylist import solver
from polylist.polynomial import Polynomial
from polylist.printing import print_polynomial

OPERATIONS = {
    "add":      algebra.add,
    "subtract": algebra.subtract,
    "multiply": algebra.multiply,
}

def sample(n):
    """The polynomial x^1 + 2x^2 + ... + nx^n."""
    return Polynomial((i, i) for i in range(1, n + 1))

def run(argv=None):
    """Entry point for the polylist executable."""

    parser = argparse.ArgumentParser(description='Polynomial linked-list demo.')
    parser.add_argument("--op", choices=sorted(OPERATIONS), default="multiply", help="Operation to apply; default=multiply")
    parser.add_argument("--first", metavar="N", type=int, default=2, help="Number of terms in list1; default=2")
    parser.add_argument("--second", metavar="N", type=int, default=3, help="Number of terms in list2; default=3")
    parser.add_argument("--merge", action="store_true", help="Combine like terms in the result")
    parser.add_argument("--prune-zeros", action="store_true", help="Drop zero terms from the result")
    parser.add_argument("--verify", action="store_true", help="Use Z3 to check that --merge/--prune-zeros preserved the result")
    parser.add_argument("--profile", action="store_true", help="Write task timings to --profile-path")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    args = parser.parse_args(argv)
    opts.read(args)

    with sample(args.first) as list1, sample(args.second) as list2:
        print_polynomial(list1, prefix="list1: ")
        print_polynomial(list2, prefix="list2: ")
        with OPERATIONS[args.op](list1, list2) as new, Polynomial(new) as raw:
            if args.merge:
                algebra.merge(new)
            if args.prune_zeros:
                algebra.prune_zeros(new)
            print_polynomial(new, prefix="new: ")
            if args.verify:
                print("verified: {}".format("yes" if solver.equivalent(raw, new) else "no"))

    if args.profile:
        logging.dump_profile()
    return 0

if __name__ == "__main__":
    run()
