"""
Immutable, codepoint-aware string value.
"""

# std
import numbers
import operator
import functools as ftl
from collections import abc

# relative
from .config import CONFIG
from .errors import ImmutableViolation, InvalidArgument, OutOfBounds
from .string import (affixes, casing, codepoints, entities, justify, regex,
                     unicode, utils)
from .string.entities import HtmlFlags


# ---------------------------------------------------------------------------- #
def _text(obj):
    # plain str from str or StringValue arguments
    return obj._str if isinstance(obj, StringValue) else str(obj)


def _texts(items):
    return [*map(_text, items)]


def _chars(chars):
    return None if chars is None else _text(chars)


def _stringify(content, encoding):
    if content is None:
        return ''

    if isinstance(content, StringValue):
        return content._str

    if isinstance(content, str):
        return content

    if isinstance(content, (bytes, bytearray)):
        try:
            return bytes(content).decode(encoding)
        except UnicodeDecodeError as err:
            raise InvalidArgument(
                f'Could not decode bytes with encoding {encoding!r}: {err}'
            ) from None

    if isinstance(content, numbers.Number):
        return str(content)

    if isinstance(content, abc.Collection) or type(content).__str__ is object.__str__:
        raise InvalidArgument(
            f'Object of type {type(content).__name__!r} has no textual '
            f'representation: {content!r}.'
        )

    return str(content)


# ---------------------------------------------------------------------------- #
@ftl.total_ordering
class StringValue:
    """
    Immutable string value. Every operation returns a new value of the same
    type, carrying the same encoding and language. Lengths and offsets count
    codepoints. Negative offsets count from the end of the string.

    Parameters
    ----------
    content : str or bytes or object, optional
        The text. `None` gives an empty string. Bytes are decoded with
        `encoding`. Objects are converted with `str`, if they define a textual
        representation.
    encoding : str, optional
        Text encoding, by default the value of `value.encoding` in the package
        config. The content has to be representable in this encoding.
    language : str, optional
        Language tag used by `to_ascii`, by default the value of
        `value.language` in the package config.

    Examples
    --------
    >>> s = StringValue('fòôbàř')
    >>> len(s), s[-1], s.substr(1, 2)
    (6, StringValue('ř', encoding='utf-8'), StringValue('òô', encoding='utf-8'))
    >>> s.to_upper_case().pad(10, '*', 'both')
    StringValue('**FÒÔBÀŘ**', encoding='utf-8')

    Raises
    ------
    InvalidArgument
        If content has no textual representation, or cannot be encoded with
        `encoding`.
    UnsupportedEncoding
        If `encoding` is unknown.
    """

    __slots__ = ('_str', '_encoding', '_language')

    # regex backend for this type. None uses `regex.engine` from the config.
    engine = None

    @classmethod
    def create(cls, content=None, encoding=None):
        """Factory for creating new values."""
        return cls(content, encoding)

    def __init__(self, content='', encoding=None, language=None):
        encoding = regex.canonical(encoding or CONFIG.value.encoding)
        content = _stringify(content, encoding)
        try:
            content.encode(encoding)
        except UnicodeEncodeError as err:
            raise InvalidArgument(
                f'Content cannot be represented in encoding {encoding!r}: {err}'
            ) from None

        language = CONFIG.value.language if language is None else language
        if not (isinstance(language, str) and language):
            raise InvalidArgument(f'Invalid language tag: {language!r}.')

        set_ = super().__setattr__
        set_('_str', content)
        set_('_encoding', encoding)
        set_('_language', language)

    def _new(self, content):
        # derived value of the same type, encoding and language
        return type(self)(content, self._encoding, self._language)

    @property
    def _kws(self):
        return dict(encoding=self._encoding, engine=self.engine)

    # ------------------------------------------------------------------------ #
    # Immutability

    def __setattr__(self, key, value):
        raise ImmutableViolation(type(self), f'set attribute {key!r} of')

    def __delattr__(self, key):
        raise ImmutableViolation(type(self), f'delete attribute {key!r} of')

    def __setitem__(self, index, value):
        raise ImmutableViolation(type(self), 'modify characters of')

    def __delitem__(self, index):
        raise ImmutableViolation(type(self), 'delete characters of')

    def __reduce__(self):
        return type(self), (self._str, self._encoding, self._language)

    # ------------------------------------------------------------------------ #
    # Representation

    def __str__(self):
        return self._str

    def __repr__(self):
        return f'{type(self).__name__}({self._str!r}, encoding={self._encoding!r})'

    def __format__(self, spec):
        return format(self._str, spec)

    def __bytes__(self):
        return self._str.encode(self._encoding)

    # ------------------------------------------------------------------------ #
    # Comparison

    def __eq__(self, other):
        if isinstance(other, StringValue):
            return (self._str, self._encoding) == (other._str, other._encoding)
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, StringValue):
            return (self._str, self._encoding) < (other._str, other._encoding)
        return NotImplemented

    def __hash__(self):
        return hash((self._str, self._encoding))

    # ------------------------------------------------------------------------ #
    # Sized / Indexable / Iterable

    def __len__(self):
        return len(self._str)

    def __bool__(self):
        return bool(self._str)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self._new(self._str[key])

        try:
            index = operator.index(key)
        except TypeError:
            raise InvalidArgument(
                f'Indices must be integers or slices, not {type(key).__name__}.'
            ) from None

        if not codepoints.offset_exists(self._str, index):
            raise OutOfBounds(index, len(self))

        return self._new(self._str[index])

    def __iter__(self):
        for char in self._str:
            yield self._new(char)

    def __reversed__(self):
        for char in reversed(self._str):
            yield self._new(char)

    def __contains__(self, needle):
        return self.contains(needle)

    def __add__(self, other):
        if isinstance(other, (str, StringValue)):
            return self.append(other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, str):
            return self.prepend(other)
        return NotImplemented

    def __mul__(self, multiplier):
        if isinstance(multiplier, numbers.Integral):
            return self.repeat(multiplier)
        return NotImplemented

    __rmul__ = __mul__

    # ------------------------------------------------------------------------ #
    # Properties

    @property
    def encoding(self):
        return self._encoding

    @property
    def language(self):
        return self._language

    def get_encoding(self):
        return self._encoding

    def get_language(self):
        return self._language

    def length(self):
        """Number of codepoints in the string."""
        return len(self._str)

    count = length

    def chars(self):
        """List of the characters in the string."""
        return list(self._str)

    def offset_exists(self, index):
        return codepoints.offset_exists(self._str, index)

    # ------------------------------------------------------------------------ #
    # Extraction

    def at(self, index):
        """Character at `index`. Empty if the index does not exist."""
        return self._new(codepoints.at(self._str, index))

    def substr(self, start, length=None):
        """
        Substring beginning at `start` with at most `length` characters. A
        `length` of None extracts the rest of the string; a negative `length`
        stops that many characters before the end.
        """
        return self._new(codepoints.substr(self._str, start, length))

    def slice(self, start, end=None):
        """
        Substring from `start` up to, but not including, `end`. If `end` is
        omitted, the remainder of the string is extracted.
        """
        return self._new(codepoints.slice_(self._str, start, end))

    def first(self, n):
        return self._new(codepoints.first(self._str, n))

    def last(self, n):
        return self._new(codepoints.last(self._str, n))

    def between(self, start, end, offset=0):
        """
        Substring between `start` and `end` delimiters, searching from
        `offset`. Empty if not found.
        """
        return self._new(codepoints.between(self._str, _text(start), _text(end),
                                            offset))

    def split(self, pattern, limit=None):
        """
        Split the string on the regex `pattern`, returning a list of values. A
        positive `limit` truncates the results to at most `limit` items.
        """
        return [*map(self._new, regex.split(_text(pattern), self._str, limit,
                                            **self._kws))]

    def lines(self):
        """Split on newlines and carriage returns."""
        return self.split(r'[\r\n]{1,2}')

    # ------------------------------------------------------------------------ #
    # Search

    def index_of(self, needle, offset=0, case_sensitive=True):
        """Index of the first occurrence of `needle`, or None if not found."""
        return codepoints.index_of(self._str, _text(needle), offset, case_sensitive)

    def index_of_last(self, needle, offset=0, case_sensitive=True):
        """Index of the last occurrence of `needle`, or None if not found."""
        return codepoints.index_of_last(self._str, _text(needle), offset,
                                        case_sensitive)

    def count_substr(self, substring, case_sensitive=True):
        return codepoints.count_substr(self._str, _text(substring), case_sensitive)

    def contains(self, needle, case_sensitive=True):
        return codepoints.contains(self._str, _text(needle), case_sensitive)

    def contains_any(self, needles, case_sensitive=True):
        return codepoints.contains_any(self._str, _texts(needles), case_sensitive)

    def contains_all(self, needles, case_sensitive=True):
        return codepoints.contains_all(self._str, _texts(needles), case_sensitive)

    def starts_with(self, substring, case_sensitive=True):
        return affixes.starts_with(self._str, _text(substring), case_sensitive)

    def starts_with_any(self, substrings, case_sensitive=True):
        return affixes.starts_with_any(self._str, _texts(substrings),
                                       case_sensitive)

    def ends_with(self, substring, case_sensitive=True):
        return affixes.ends_with(self._str, _text(substring), case_sensitive)

    def ends_with_any(self, substrings, case_sensitive=True):
        return affixes.ends_with_any(self._str, _texts(substrings), case_sensitive)

    # ------------------------------------------------------------------------ #
    # Predicates

    def has_lower_case(self):
        return casing.has_lower_case(self._str, **self._kws)

    def has_upper_case(self):
        return casing.has_upper_case(self._str, **self._kws)

    def is_alpha(self):
        return casing.is_alpha(self._str, **self._kws)

    def is_alphanumeric(self):
        return casing.is_alphanumeric(self._str, **self._kws)

    def is_blank(self):
        return casing.is_blank(self._str, **self._kws)

    def is_hexadecimal(self):
        return casing.is_hexadecimal(self._str, **self._kws)

    def is_lower_case(self):
        return casing.is_lower_case(self._str, **self._kws)

    def is_upper_case(self):
        return casing.is_upper_case(self._str, **self._kws)

    def is_base64(self):
        return utils.is_base64(self._str)

    def is_json(self):
        return utils.is_json(self._str)

    def is_serialized(self):
        return utils.is_serialized(self._str)

    # ------------------------------------------------------------------------ #
    # Affixes

    def append(self, string):
        return self._new(self._str + _text(string))

    def prepend(self, string):
        return self._new(_text(string) + self._str)

    def surround(self, substring):
        return self._new(utils.surround(self._str, _text(substring)))

    def insert(self, substring, index):
        return self._new(utils.insert(_text(substring), self._str, index))

    def ensure_left(self, substring):
        return self._new(affixes.ensure_left(self._str, _text(substring)))

    def ensure_right(self, substring):
        return self._new(affixes.ensure_right(self._str, _text(substring)))

    def remove_left(self, substring):
        return self._new(affixes.remove_left(self._str, _text(substring)))

    def remove_right(self, substring):
        return self._new(affixes.remove_right(self._str, _text(substring)))

    def longest_common_prefix(self, other):
        return self._new(affixes.longest_common_prefix(self._str, _text(other)))

    def longest_common_suffix(self, other):
        return self._new(affixes.longest_common_suffix(self._str, _text(other)))

    def longest_common_substring(self, other):
        """
        Longest common substring with `other`. In the case of ties, the one
        that occurs first is returned.
        """
        return self._new(affixes.longest_common_substring(self._str, _text(other)))

    # ------------------------------------------------------------------------ #
    # Padding / trimming / truncating

    def pad(self, length, pad_str=' ', side='right'):
        """
        Pad the string to `length` with `pad_str`. `side` is one of 'left',
        'right' or 'both'.
        """
        return self._new(justify.pad(self._str, length, _text(pad_str), side))

    def pad_left(self, length, pad_str=' '):
        return self.pad(length, pad_str, 'left')

    def pad_right(self, length, pad_str=' '):
        return self.pad(length, pad_str, 'right')

    def pad_both(self, length, pad_str=' '):
        return self.pad(length, pad_str, 'both')

    def trim(self, chars=None):
        return self._new(casing.trim(self._str, _chars(chars), **self._kws))

    def trim_left(self, chars=None):
        return self._new(casing.trim_left(self._str, _chars(chars), **self._kws))

    def trim_right(self, chars=None):
        return self._new(casing.trim_right(self._str, _chars(chars), **self._kws))

    def truncate(self, length, substring=''):
        return self._new(utils.truncate(self._str, length, _text(substring)))

    def safe_truncate(self, length, substring=''):
        return self._new(utils.safe_truncate(self._str, length, _text(substring)))

    # ------------------------------------------------------------------------ #
    # Whitespace / delimiting

    def collapse_whitespace(self):
        return self._new(casing.collapse_whitespace(self._str, **self._kws))

    def strip_whitespace(self):
        return self._new(casing.strip_whitespace(self._str, **self._kws))

    def delimit(self, delimiter):
        return self._new(casing.delimit(self._str, _text(delimiter), **self._kws))

    def dasherize(self):
        return self.delimit('-')

    def underscored(self):
        return self.delimit('_')

    def to_spaces(self, tab_length=4):
        return self._new(utils.to_spaces(self._str, tab_length))

    def to_tabs(self, tab_length=4):
        return self._new(utils.to_tabs(self._str, tab_length))

    # ------------------------------------------------------------------------ #
    # Case

    def to_lower_case(self):
        return self._new(self._str.lower())

    def to_upper_case(self):
        return self._new(self._str.upper())

    def to_title_case(self):
        return self._new(casing.to_title_case(self._str, **self._kws))

    def lower_case_first(self):
        return self._new(casing.lower_case_first(self._str))

    def upper_case_first(self):
        return self._new(casing.upper_case_first(self._str))

    def swap_case(self):
        return self._new(casing.swap_case(self._str, **self._kws))

    def titleize(self, ignore=None):
        ignore = None if ignore is None else _texts(ignore)
        return self._new(casing.titleize(self._str, ignore, **self._kws))

    def humanize(self):
        return self._new(casing.humanize(self._str, **self._kws))

    # ------------------------------------------------------------------------ #
    # Replacement / transformation

    def replace(self, search, replacement):
        """Replace all literal occurrences of `search`."""
        return self._new(self._str.replace(_text(search), _text(replacement)))

    def regex_replace(self, pattern, replacement, options=None):
        """
        Replace all matches of the regex `pattern` with `replacement`, which may
        contain back references like '\\1'. See `stringent.string.regex` for
        the meaning of the `options` letters.
        """
        if not callable(replacement):
            replacement = _text(replacement)
        return self._new(regex.sub(_text(pattern), replacement, self._str,
                                   options, **self._kws))

    def repeat(self, multiplier):
        return self._new(utils.repeat(self._str, multiplier))

    def reverse(self):
        return self._new(utils.reverse(self._str))

    def shuffle(self, rng=None):
        """Characters in random order. `rng` is an optional `random.Random`."""
        return self._new(utils.shuffle(self._str, rng))

    def tidy(self):
        return self._new(utils.tidy(self._str))

    def to_ascii(self, language=None, remove_unsupported=True):
        """
        ASCII transliteration. The value's own language is used unless
        `language` is given.
        """
        language = self._language if language is None else language
        return self._new(unicode.to_ascii(self._str, language, remove_unsupported))

    def html_encode(self, flags=HtmlFlags.COMPAT):
        return self._new(entities.html_encode(self._str, flags, self._encoding))

    def html_decode(self, flags=HtmlFlags.COMPAT):
        return self._new(entities.html_decode(self._str, flags, self._encoding))


# alias
create = StringValue.create
