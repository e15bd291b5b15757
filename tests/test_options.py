import warnings

import pytest

from plotcov.ellipse.options import EllipseOptions
from plotcov.utils.options import process_options


def test_resolves_defaults_and_collects_unused():
    values, unused = process_options(['b', 5, 'c', 9], ['a', 1, 'b', 2], nout=3)

    assert dict(values) == {'a': 1, 'b': 5}
    assert dict(unused) == {'c': 9}


def test_default_slots_collect_unused():
    parsed = process_options({'b': 5, 'c': 9}, {'a': 1, 'b': 2})

    assert parsed.values['a'] == 1
    assert parsed.values['b'] == 5
    assert dict(parsed.unused) == {'c': 9}


def test_names_match_case_insensitively():
    values, unused = process_options(['CONF', 0.5], ['conf', 0.9])

    assert values['conf'] == 0.5
    assert not unused


def test_unused_order_follows_caller():
    _, unused = process_options(['z', 1, 'a', 2, 'm', 3], ['x', 0])
    assert list(unused) == ['z', 'a', 'm']


def test_exact_slots_warn_about_unused():
    with pytest.warns(UserWarning, match="Option 'c' not used."):
        values, unused = process_options(['c', 9], ['a', 1, 'b', 2], nout=2)

    assert dict(values) == {'a': 1, 'b': 2}
    assert not unused


def test_exact_slots_matched_options_do_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        values, _ = process_options(['a', 3], ['a', 1, 'b', 2], nout=2)

    assert values['a'] == 3


@pytest.mark.parametrize('defaults', [['a', 1], [], ['a', 1, 'b', 2, 'c', 3]])
def test_odd_length_options_fail(defaults):
    with pytest.raises(ValueError, match='name/value pair'):
        process_options(['a', 1, 'b'], defaults)


def test_insufficient_slots_fail():
    with pytest.raises(ValueError, match='Insufficient'):
        process_options([], ['a', 1, 'b', 2], nout=1)


def test_non_string_names_never_match():
    values, unused = process_options([1, 'x'], ['a', 1])

    assert values['a'] == 1
    assert dict(unused) == {1: 'x'}


def test_ellipse_options_split_style():
    opts = EllipseOptions.from_kwargs({'conf': 0.5, 'color': 'g', 'lw': 2})

    assert opts.conf == 0.5
    assert opts.num_pts == 100
    assert opts.style == {'color': 'g', 'lw': 2}


def test_ellipse_options_defaults():
    opts = EllipseOptions.from_kwargs({})

    assert opts.conf == 0.9
    assert opts.num_pts == 100
    assert opts.style == {}


@pytest.mark.parametrize('kwargs', [{'num_pts': 0}, {'num_pts': 2.5}, {'conf': 1.2}])
def test_ellipse_options_validation(kwargs):
    with pytest.raises(ValueError):
        EllipseOptions.from_kwargs(kwargs)
