"""
Utilities for operations on strings
"""

# std
import io
import json
import random
import base64
import binascii
import pickletools

# relative
from .codepoints import index_of, normalize


# ---------------------------------------------------------------------------- #
# Windows-1252 punctuation (common in word processor output) -> ascii
TIDY_MAP = str.maketrans({
    '…': '...',    # horizontal ellipsis
    '“': '"',      # left double quotation mark
    '”': '"',      # right double quotation mark
    '‘': "'",      # left single quotation mark
    '’': "'",      # right single quotation mark
    '–': '-',      # en dash
    '—': '-',      # em dash
})


# ---------------------------------------------------------------------------- #
# Insertion / wrapping

def insert(sub, string, index):
    """
    Insert a substring `sub` into `string` immediately before `index` position.

    Parameters
    ----------
    sub, string : str
        Any string.
    index : int
        Index position before which to insert `sub`. Negative indices count
        from the end. If `index` is beyond the end of the string, the string is
        returned unchanged.

    Examples
    --------
    >>> insert('ô', 'fbàř', 1)
    'fôbàř'

    Returns
    -------
    string
        Modified string
    """
    if index > len(string):
        return string

    index = normalize(index, len(string))
    return string[:index] + sub + string[index:]


def surround(string, left, right=None, sep=''):
    if not right:
        right = left
    return sep.join((left, string, right))


def reverse(string):
    return string[::-1]


def repeat(string, multiplier):
    return string * max(int(multiplier), 0)


def shuffle(string, rng=None):
    """
    Characters of `string` in uniformly random order.

    Parameters
    ----------
    string : str
        Text to shuffle.
    rng : random.Random, optional
        Source of randomness, by default the `random` module's global
        generator.
    """
    chars = list(string)
    (rng or random).shuffle(chars)
    return ''.join(chars)


# ---------------------------------------------------------------------------- #
# Truncation

def truncate(string, length, substring=''):
    """
    Truncate `string` to `length` codepoints. If truncating occurs and
    `substring` is given, the string is cut further so that `substring` can be
    appended without exceeding `length`.

    Examples
    --------
    >>> truncate('The quick brown fox', 10)
    'The quick '
    >>> truncate('The quick brown fox', 10, '...')
    'The qui...'
    """
    if length >= len(string):
        return string

    return string[:max(length - len(substring), 0)] + substring


def safe_truncate(string, length, substring=''):
    """
    Truncate `string` to `length` codepoints, without splitting words. If
    truncating occurs and `substring` is given, the string is cut further so
    that `substring` can be appended without exceeding `length`.

    Examples
    --------
    >>> safe_truncate('The quick brown fox', 10)
    'The quick'
    >>> safe_truncate('The quick brown fox', 11, '...')
    'The...'
    """
    if length >= len(string):
        return string

    length = max(length - len(substring), 0)
    truncated = string[:length]

    # If the last word was truncated, back off to the previous space
    if index_of(string, ' ', max(length - 1, 0)) != length:
        last = truncated.rfind(' ')
        if last != -1:
            truncated = truncated[:last]

    return truncated + substring


# ---------------------------------------------------------------------------- #
# Transformations

def tidy(string):
    """
    Replace smart quotes, ellipsis characters and dashes from Windows-1252 with
    their ASCII equivalents.

    Examples
    --------
    >>> tidy('“I see…”')
    '"I see..."'
    """
    return string.translate(TIDY_MAP)


def to_spaces(string, tab_length=4):
    return string.replace('\t', ' ' * tab_length)


def to_tabs(string, tab_length=4):
    return string.replace(' ' * tab_length, '\t')


# ---------------------------------------------------------------------------- #
# Format detection

def is_base64(string):
    """
    Whether `string` is strictly base64 encoded, ie. decoding and re-encoding
    it reproduces the string exactly.
    """
    try:
        decoded = base64.b64decode(string, validate=True)
    except (binascii.Error, ValueError):
        return False

    return base64.b64encode(decoded).decode('ascii') == string


def _reject_constant(name):
    raise ValueError(f'Invalid JSON constant: {name}.')


def is_json(string):
    """
    Whether `string` is valid JSON. An empty string is not considered valid
    JSON, neither are the non-standard constants 'NaN' and 'Infinity'.
    """
    if not string:
        return False

    try:
        json.loads(string, parse_constant=_reject_constant)
    except ValueError:
        return False

    return True


def is_serialized(string):
    """
    Whether `string` is a complete pickle in the legacy text protocol (0).

    The opcode stream is inspected without unpickling, so it is safe to call on
    untrusted input.

    Examples
    --------
    >>> is_serialized("S'hello'\\np0\\n.")
    True
    >>> is_serialized('hello')
    False
    """
    try:
        data = string.encode('ascii')
    except UnicodeEncodeError:
        return False

    if not data:
        return False

    stream = io.BytesIO(data)
    try:
        for opcode, _, _ in pickletools.genops(stream):
            if opcode.proto > 0:
                return False
    except ValueError:
        return False

    # genops stops at the STOP opcode: it has to be the last byte
    return stream.tell() == len(data)
