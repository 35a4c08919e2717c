"""Single-variable polynomials stored as singly-linked lists of terms.

Important modules:
 - polylist.polynomial: the Polynomial list type and its primitives
 - polylist.algebra: add, subtract, multiply, merge
 - polylist.printing: the " + Cx^E" text format
 - polylist.solver: Z3-backed equivalence checks
"""
