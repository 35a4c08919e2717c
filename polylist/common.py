"""Small helpers shared by the polylist modules.

 - fresh_address: allocate a never-before-seen node address
 - OrderedSet: re-exported from the ordered_set package, used for
   first-occurrence exponent sets
"""

# builtins
from multiprocessing import Value
import ctypes

# 3rd party
from ordered_set import OrderedSet

# Address 0 is reserved for the HEAD sentinel.
_address_counter = Value(ctypes.c_uint64, 1)

def fresh_address():
    """Return a positive integer never returned before.

    Addresses are distinct across threads and forked processes, so a handle
    from one polynomial can never name a node of another.
    """
    with _address_counter.get_lock():
        a = _address_counter.value
        _address_counter.value = a + 1
    return a
