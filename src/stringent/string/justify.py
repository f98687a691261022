"""
Pad strings to a given length.
"""


# std
import math

# third-party
import more_itertools as mit

# relative
from ..errors import InvalidArgument


# ---------------------------------------------------------------------------- #
PAD_SIDES = ('left', 'right', 'both')

# ---------------------------------------------------------------------------- #


def resolve_side(side):
    if side not in PAD_SIDES:
        raise InvalidArgument(f'Pad expects `side` to be one of {PAD_SIDES}, '
                              f'not {side!r}.')
    return side


def split_deficit(deficit, side):
    """Number of pad characters to add on the (left, right)."""
    if side == 'left':
        return deficit, 0

    if side == 'right':
        return 0, deficit

    return deficit // 2, math.ceil(deficit / 2)


def padding(unit, size):
    """
    Repeat the pad string `unit` until it covers `size` codepoints, then trim to
    exactly that length.

    Examples
    --------
    >>> padding('-=', 5)
    '-=-=-'
    """
    if size <= 0 or not unit:
        return ''

    return ''.join(mit.ncycles(unit, math.ceil(size / len(unit))))[:size]


def pad(string, length, pad_str=' ', side='right'):
    """
    Pad `string` to `length` codepoints with `pad_str`. If `length` is less than
    or equal to the length of the string, no padding takes place.

    Parameters
    ----------
    string : str
        The string to pad.
    length : int
        Desired length after padding.
    pad_str : str, optional
        String used to pad, by default a space. May be longer than a single
        character.
    side : {'right', 'left', 'both'}
        Where to add the padding. For 'both', the left side receives the
        smaller half when the deficit is odd.

    Examples
    --------
    >>> pad('foo', 8, '¬ø', 'both')
    '¬øfoo¬ø¬'

    Returns
    -------
    str

    Raises
    ------
    InvalidArgument
        If `side` is not one of 'left', 'right' or 'both'.
    """
    side = resolve_side(side)
    deficit = int(length) - len(string)
    if deficit <= 0 or not pad_str:
        return string

    left, right = split_deficit(deficit, side)
    return ''.join((padding(pad_str, left), string, padding(pad_str, right)))


def pad_left(string, length, pad_str=' '):
    return pad(string, length, pad_str, 'left')


def pad_right(string, length, pad_str=' '):
    return pad(string, length, pad_str, 'right')


def pad_both(string, length, pad_str=' '):
    return pad(string, length, pad_str, 'both')
