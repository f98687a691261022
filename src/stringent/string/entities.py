"""
HTML entity encoding and decoding.
"""

# std
import re
import enum
from html import unescape
from html.entities import codepoint2name

# relative
from .regex import canonical


# ---------------------------------------------------------------------------- #
RGX_ENTITY = re.compile(r'&(?:#[xX][0-9a-fA-F]+|#\d+|[A-Za-z][A-Za-z0-9]*);')


class HtmlFlags(enum.IntFlag):
    """Which quote characters are converted to and from entities."""

    NOQUOTES = 0
    DOUBLE = 1
    SINGLE = 2
    # aliases
    COMPAT = DOUBLE
    QUOTES = DOUBLE | SINGLE


QUOTE_FLAGS = {'"': HtmlFlags.DOUBLE,
               "'": HtmlFlags.SINGLE}

# ---------------------------------------------------------------------------- #


def _encode_char(char, flags):
    if (flag := QUOTE_FLAGS.get(char)) is not None:
        if not flags & flag:
            return char
        if char == "'":
            return '&#039;'

    if name := codepoint2name.get(ord(char)):
        return f'&{name};'

    return char


def html_encode(string, flags=HtmlFlags.COMPAT, encoding='utf-8'):
    """
    Convert all characters that have a named HTML entity into that entity.

    Parameters
    ----------
    string : str
        Text to encode.
    flags : HtmlFlags, optional
        Which quotes to encode, by default double quotes only.
    encoding : str, optional
        Text encoding of `string`. Raises `UnsupportedEncoding` if unknown.

    Examples
    --------
    >>> html_encode('<café & "bar">')
    '&lt;caf&eacute; &amp; &quot;bar&quot;&gt;'
    """
    flags = HtmlFlags(flags)
    canonical(encoding)
    return ''.join(_encode_char(char, flags) for char in string)


def html_decode(string, flags=HtmlFlags.COMPAT, encoding='utf-8'):
    """
    Convert named and numeric HTML character references to the characters they
    represent. Quote entities are left alone unless selected by `flags`, and so
    are references to characters that cannot be represented in `encoding`.

    Examples
    --------
    >>> html_decode('&lt;caf&eacute;&gt; &#039;single&#039;')
    "<café> &#039;single&#039;"
    >>> html_decode('caf&eacute; &amp; co', encoding='ascii')
    'caf&eacute; & co'
    """
    flags = HtmlFlags(flags)
    encoding = canonical(encoding)

    def decode(match):
        char = unescape(match[0])
        if (flag := QUOTE_FLAGS.get(char)) is not None and not flags & flag:
            return match[0]

        try:
            char.encode(encoding)
        except UnicodeEncodeError:
            return match[0]

        return char

    return RGX_ENTITY.sub(decode, string)
