import collections
import collections.abc
import warnings

ParsedOptions = collections.namedtuple('ParsedOptions', ['values', 'unused'])


def _as_pairs(options):
    if isinstance(options, collections.abc.Mapping):
        return list(options.items())

    options = list(options)
    if len(options) % 2:
        raise ValueError('Each option must be a name/value pair.')

    return list(zip(options[0::2], options[1::2]))


def _matches(name, option):
    return isinstance(name, str) and name.lower() == option.lower()


def process_options(args, defaults, nout=None):
    """
    Resolve name/value options against a set of recognized names.

    Args:
        args: the caller's options, a flat sequence
            [name1, value1, name2, value2, ...] or a mapping.
        defaults: the recognized option names with their default values,
            in the same form as args.
        nout: the number of result slots. Defaults to one per recognized
            option plus one for the unused options. With exactly one slot
            per recognized option, unused options are warned about and
            dropped instead of collected.

    Returns:
        ParsedOptions(values, unused): values maps every recognized name
        to the caller's value (names compared case-insensitively) or to
        its default; unused holds the unmatched caller options in the
        order they were given.
    """
    args = _as_pairs(args)
    defaults = _as_pairs(defaults)

    n = len(defaults)
    if nout is None:
        nout = n + 1

    if nout < n:
        raise ValueError(
            'Insufficient number of output slots given: '
            '{} for {} options'.format(nout, n)
        )
    warn = nout == n

    values = collections.OrderedDict(defaults)
    unused = collections.OrderedDict()

    for name, value in args:
        for option, _ in defaults:
            if _matches(name, option):
                values[option] = value
                break
        else:
            if warn:
                warnings.warn("Option '{}' not used.".format(name))
            else:
                unused[name] = value

    return ParsedOptions(values, unused)
