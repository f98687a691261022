
# third-party
import pytest

# local
from stringent import InvalidArgument
from stringent.string import justify
from stringent.testing import Expected, Throws, mock


# ---------------------------------------------------------------------------- #
test_pad = Expected('pad')({
    mock.pad('foo bar', 9):                             'foo bar  ',
    mock.pad('foo bar', 9, ' ', 'left'):                '  foo bar',
    mock.pad('foo bar', 10, '_*', 'left'):              '_*_foo bar',
    mock.pad('foo bar', 10, '_*', 'right'):             'foo bar_*_',
    mock.pad('foo bar', 10, '_*', 'both'):              '_foo bar_*',
    mock.pad('fòôbàř', 12, '¬ø', 'both'):               '¬ø¬fòôbàř¬ø¬',
    mock.pad('fòôbàř', 9, '-é', side='left'):           '-é-fòôbàř',
    mock.pad('foo bar', 5):                             'foo bar',
    mock.pad('foo bar', 7, '_', 'both'):                'foo bar',
    mock.pad('foo bar', 10, ''):                        'foo bar',
    mock.pad('foo bar', 10, side='middle'):             Throws(InvalidArgument),
})

test_pad_left = Expected('pad_left')({
    mock.pad_left('foo bar', 9):                '  foo bar',
    mock.pad_left('fòôbàř', 10, '¬ø'):          '¬ø¬øfòôbàř',
    mock.pad_left('foo bar', 3):                'foo bar',
})

test_pad_right = Expected('pad_right')({
    mock.pad_right('foo bar', 9):               'foo bar  ',
    mock.pad_right('fòôbàř', 9, '¬ø'):          'fòôbàř¬ø¬',
})

test_pad_both = Expected('pad_both')({
    mock.pad_both('foo bar', 9):                ' foo bar ',
    mock.pad_both('foo bar', 8, '¬ø'):          'foo bar¬',
    mock.pad_both('fòôbàř', 11, '¬ø'):          '¬øfòôbàř¬ø¬',
})


@pytest.mark.parametrize(
    'unit, size, expected',
    [('-=', 5, '-=-=-'),
     ('¬ø', 1, '¬'),
     ('x', 0, ''),
     ('', 5, '')]
)
def test_padding(unit, size, expected):
    assert justify.padding(unit, size) == expected


def test_pad_length_invariant():
    for length in range(6, 20):
        for side in justify.PAD_SIDES:
            assert len(justify.pad('fòôbàř', length, 'ab', side)) == length
