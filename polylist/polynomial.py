"""Polynomials stored as singly-linked lists of terms.

A Polynomial owns an arena of nodes.  Each node has an address (a positive
integer from `common.fresh_address`) and the arena maps addresses to terms
and to the address of the next node.  Address 0 is the sentinel HEAD node
that precedes the first term, so every splice is "link after some node".

Nodes are named by Handles.  A Handle carries the node address and a
snapshot of the node's term; handles compare by address only, so two nodes
with equal terms are never confused.  Operations that take a handle act on
exactly the node it names.

Important classes:
 - Polynomial: the list primitives (find, insert, delete, traversal, ...)
 - Handle / HEAD: node references
 - TermNotFound, AllocationFailure: errors raised by the primitives

The algebra (add, subtract, multiply, merge) lives in polylist.algebra.
"""

from polylist.common import fresh_address, OrderedSet
from polylist.terms import as_term

class TermNotFound(LookupError):
    pass

class AllocationFailure(MemoryError):
    pass

class Handle(object):
    __slots__ = ("address", "term")

    def __init__(self, address, term):
        self.address = address
        self.term = term

    def __eq__(self, other):
        return isinstance(other, Handle) and self.address == other.address

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.address)

    def __repr__(self):
        return "Handle({!r}, {!r})".format(self.address, self.term)

_HEAD = 0
HEAD = Handle(_HEAD, None)

class Polynomial(object):
    """An ordered, mutable sequence of terms.

    Duplicate exponents are allowed; nothing is combined until
    `polylist.algebra.merge` is called.  Use the polynomial as a context
    manager to guarantee `clean` runs:

        with Polynomial([(1, 1), (2, 2)]) as p:
            ...
    """

    def __init__(self, terms=()):
        self._version = 0
        self.init()
        for t in terms:
            self.append(t)

    def init(self):
        """Make this polynomial empty and usable."""
        self._terms = {}
        self._next = {_HEAD: None}
        self._tail = _HEAD
        self._version += 1

    def clean(self):
        """Release every node.  The polynomial is empty afterwards."""
        self._terms.clear()
        self.init()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.clean()
        return False

    def is_empty(self):
        return self._next[_HEAD] is None

    def __len__(self):
        return len(self._terms)

    def _handle(self, address):
        if address == _HEAD:
            return HEAD
        return Handle(address, self._terms[address])

    def _require(self, handle, allow_head=False):
        a = handle.address
        if a == _HEAD and allow_head:
            return a
        if a not in self._terms:
            raise TermNotFound("{!r} is not in this polynomial".format(handle))
        return a

    def _prev_of(self, address):
        prev = _HEAD
        while self._next[prev] != address:
            prev = self._next[prev]
        return prev

    def _addresses(self):
        version = self._version
        a = self._next[_HEAD]
        while a is not None:
            yield a
            if self._version != version:
                raise RuntimeError("polynomial changed during traversal")
            a = self._next[a]

    # -- lookup ---------------------------------------------------------------

    def first(self):
        a = self._next[_HEAD]
        return None if a is None else self._handle(a)

    def next(self, handle):
        """The handle after `handle` (HEAD gives the first), or None at the end."""
        a = self._next[self._require(handle, allow_head=True)]
        return None if a is None else self._handle(a)

    def last(self):
        """The final node, or HEAD when the polynomial is empty."""
        return self._handle(self._tail)

    def find(self, handle):
        """A fresh handle for the node `handle` names, or None if absent."""
        a = handle.address
        if a == _HEAD or a not in self._terms:
            return None
        return self._handle(a)

    def find_prev(self, handle):
        """The node before `handle`.

        Returns HEAD when `handle` is the first node and None when it is not
        in this polynomial (always the case for an empty polynomial).
        """
        a = handle.address
        if a == _HEAD or a not in self._terms:
            return None
        return self._handle(self._prev_of(a))

    def term(self, handle):
        return self._terms[self._require(handle)]

    # -- mutation -------------------------------------------------------------

    def _link_after(self, prev, term):
        term = as_term(term)
        address = fresh_address()
        try:
            self._terms[address] = term
            self._next[address] = self._next[prev]
        except MemoryError as e:
            self._terms.pop(address, None)
            self._next.pop(address, None)
            raise AllocationFailure("no storage for {!r}".format(term)) from e
        self._next[prev] = address
        if prev == self._tail:
            self._tail = address
        self._version += 1
        return Handle(address, term)

    def _unlink_after(self, prev):
        a = self._next[prev]
        self._next[prev] = self._next.pop(a)
        term = self._terms.pop(a)
        if self._tail == a:
            self._tail = prev
        self._version += 1
        return term

    def append(self, term):
        """Add `term` at the tail and return its handle."""
        return self._link_after(self._tail, term)

    def insert(self, after, term):
        """Splice `term` in after the node `after` (HEAD prepends)."""
        return self._link_after(self._require(after, allow_head=True), term)

    def insert_prev(self, before, term):
        """Splice `term` in before the node `before`."""
        return self._link_after(self._prev_of(self._require(before)), term)

    def delete(self, handle):
        """Remove the node `handle` names and return its term."""
        return self._unlink_after(self._prev_of(self._require(handle)))

    def delete_next(self, handle):
        """Remove the node after `handle` (HEAD removes the first) in O(1)."""
        prev = self._require(handle, allow_head=True)
        if self._next[prev] is None:
            raise TermNotFound("nothing follows {!r}".format(handle))
        return self._unlink_after(prev)

    def replace(self, handle, term):
        """Overwrite the term stored at `handle`; the node keeps its place."""
        a = self._require(handle)
        self._terms[a] = as_term(term)
        self._version += 1
        return Handle(a, self._terms[a])

    # -- traversal ------------------------------------------------------------

    def __iter__(self):
        for a in self._addresses():
            yield self._terms[a]

    def handles(self):
        for a in self._addresses():
            yield Handle(a, self._terms[a])

    def for_each(self, visitor):
        """Call `visitor(term)` for every term, in order.

        The visitor must not modify this polynomial; doing so raises
        RuntimeError.
        """
        for t in self:
            visitor(t)

    def exponents(self):
        return OrderedSet(t.exponent for t in self)

    def degree(self):
        if self.is_empty():
            return None
        return max(t.exponent for t in self)

    # -- comparisons and operators --------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return list(self) == list(other)

    __hash__ = None

    def __add__(self, other):
        from polylist.algebra import add
        return add(self, other)

    def __sub__(self, other):
        from polylist.algebra import subtract
        return subtract(self, other)

    def __mul__(self, other):
        from polylist.algebra import multiply
        return multiply(self, other)

    def __repr__(self):
        return "Polynomial([{}])".format(", ".join(repr(tuple(t)) for t in self))

    def __str__(self):
        from polylist.printing import format_polynomial
        return format_polynomial(self)
