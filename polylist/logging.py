"""Indented, timed log messages.

Important functions:
 - task: a context manager wrapping one operation (add, merge, a solver call)
 - event: print a message indented under the active tasks
 - dump_profile: write accumulated task durations to a file

Nothing is printed unless the `verbose` option is set.  Durations are always
accumulated so that `dump_profile` works either way.  Each thread has its own
task stack; the duration totals are shared by all threads.
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import sys
import threading

from polylist.opts import Option

verbose = Option("verbose", bool, False, description="Print a line for every polynomial operation")
profile_path = Option("profile-path", str, "/tmp/polylist.profile", metavar="PATH",
    description="Where --profile writes task timings")

_times = defaultdict(float)
_counts = defaultdict(int)
_times_lock = threading.Lock()
_local = threading.local()
_begin = datetime.datetime.now()

def _task_stack():
    stack = getattr(_local, "stack", None)
    if stack is None:
        stack = _local.stack = []
    return stack

def log(string, file=None):
    if verbose.value:
        print(string, file=file or sys.stdout)

def _indent(depth):
    return "  " * depth

def _describe(kwargs):
    if not kwargs:
        return ""
    return " [" + ", ".join("{}={}".format(k, v) for k, v in kwargs.items()) + "]"

def task_begin(name, **kwargs):
    stack = _task_stack()
    stack.append((name, datetime.datetime.now()))
    log("{}{}{}...".format(_indent(len(stack) - 1), name, _describe(kwargs)))

def task_end():
    end = datetime.datetime.now()
    stack = _task_stack()
    key = tuple(name for name, start in stack)
    name, start = stack.pop()
    duration = (end - start).total_seconds()
    with _times_lock:
        _times[key] += duration
        _counts[key] += 1
    log("{}Finished {} [duration={:.3}s]".format(_indent(len(stack)), name, duration))

@contextmanager
def task(name, **kwargs):
    try:
        yield task_begin(name, **kwargs)
    finally:
        task_end()

def event(name):
    log("{}{}".format(_indent(len(_task_stack())), name))

def times():
    """Accumulated (seconds, calls) for each task path seen so far."""
    with _times_lock:
        return { k : (_times[k], _counts[k]) for k in _times }

def dump_profile(path=None):
    duration = (datetime.datetime.now() - _begin).total_seconds()
    totals = times()
    with open(path or profile_path.value, "w") as f:
        f.write("Total duration: {:.3} seconds\n".format(duration))
        f.write("Currently in: {}\n\n".format(", ".join(name for (name, start) in _task_stack())))
        for k in sorted(totals, key=lambda k: totals[k][0], reverse=True):
            f.write("{:16.3} {:8} ".format(*totals[k]))
            f.write(", ".join(k))
            f.write("\n")
