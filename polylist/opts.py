"""Module-local options.

Each polylist module that has a tunable setting (the overflow policy, solver
timeouts, verbosity) declares an Option next to the code that reads it.  All
Options register themselves here, so `setup` can expose every one of them on
a command-line parser without a central list.

Read an option's current value with `opt.value`.  Tests that need a
different setting should wrap their changes in `snapshot` / `restore`.
"""

# Every Option created so far, in creation order.
_OPTS = []

# Values to use for options declared after a `restore`.
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None, choices=None, minimum=None):
        assert type in (bool, str, int)
        self.name = name
        self.type = type
        self.default = default
        self.description = description
        self.metavar = metavar
        self.choices = tuple(choices) if choices is not None else None
        self.minimum = minimum
        self.value = None
        self.set(_DEFAULT_VALUE_OVERRIDES.get(name, default))
        _OPTS.append(self)

    def set(self, value):
        value = self.type(value)
        if self.choices is not None and value not in self.choices:
            raise ValueError("option {} must be one of {}, not {!r}".format(
                self.name, ", ".join(self.choices), value))
        if self.minimum is not None and value < self.minimum:
            raise ValueError("option {} must be at least {}, not {!r}".format(
                self.name, self.minimum, value))
        self.value = value

    def __bool__(self):
        raise Exception(
            "An Option was used as a boolean. " +
            "Read its setting with `_.value` instead.")

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

def _argname(o):
    if o.type is bool:
        return ("no-" + o.name) if o.default else o.name
    return o.name

def _help(o):
    default = "default={}".format(repr(o.default))
    return "{} ({})".format(o.description, default) if o.description else default

def setup(parser):
    """Add an argument to `parser` for every known Option."""
    for o in _OPTS:
        n = _argname(o)
        if o.type is bool:
            parser.add_argument("--" + n, action="store_true", default=False, help=o.description)
        else:
            parser.add_argument("--" + n,
                metavar=o.metavar,
                default=o.default,
                choices=o.choices,
                type=o.type,
                help=_help(o))

def read(args):
    """Load Option values from an argparse namespace built by `setup`."""
    for o in _OPTS:
        v = getattr(args, _argname(o).replace("-", "_"))
        if o.type is bool and o.default:
            v = not v
        o.set(v)

def snapshot():
    """Produce a snapshot of current option values."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES
    for o in _OPTS:
        if o.name in snap:
            o.set(snap[o.name])
    _DEFAULT_VALUE_OVERRIDES = dict(snap)
