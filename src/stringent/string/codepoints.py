"""
Codepoint-offset extraction and search.

All offsets count codepoints, never bytes. Negative offsets follow a single
rule throughout the package: an offset `k < 0` denotes position `len(text) + k`,
clamped at zero. This is the same convention as python slicing.
"""

# relative
from . import regex


# ---------------------------------------------------------------------------- #
def normalize(index, size):
    """
    Resolve a possibly negative offset to a position in the range [0, size].
    """
    index = int(index)
    if index < 0:
        return max(size + index, 0)
    return min(index, size)


def substr(text, start, length=None):
    """
    Substring of `text` beginning at `start` with at most `length` codepoints.
    A `length` of None extracts to the end of the string. A negative `length`
    stops that many codepoints before the end.

    Examples
    --------
    >>> substr('fòôbàř', 1, 3)
    'òôb'
    >>> substr('fòôbàř', -3)
    'bàř'
    >>> substr('fòôbàř', 1, -2)
    'òôb'
    """
    size = len(text)
    start = normalize(start, size)
    if length is None:
        return text[start:]

    if length < 0:
        return text[start:normalize(length, size)]

    return text[start:start + int(length)]


def at(text, index):
    """Character at `index`, or an empty string if the index does not exist."""
    return substr(text, index, 1) if offset_exists(text, index) else ''


def offset_exists(text, index):
    size = len(text)
    index = int(index)
    if index >= 0:
        return size > index
    return size >= abs(index)


def slice_(text, start, end=None):
    """
    Codepoints from `start` up to, but not including `end`. Omitting `end`
    extracts the remainder of the string.

    Examples
    --------
    >>> slice_('fòôbàř', 3)
    'bàř'
    >>> slice_('fòôbàř', -3, -1)
    'bà'
    """
    size = len(text)
    start = normalize(start, size)
    end = size if end is None else normalize(end, size)
    return text[start:end] if end > start else ''


def first(text, n):
    return text[:n] if n > 0 else ''


def last(text, n):
    return text[-n:] if n > 0 else ''


# ---------------------------------------------------------------------------- #
# Search

def ignore_case(needle):
    """
    Compiled pattern matching `needle` literally, ignoring case. Case is
    folded one codepoint at a time, so match positions are offsets into the
    original text.
    """
    return regex.compile(regex.escape(needle), 'i')


def index_of(text, needle, offset=0, case_sensitive=True):
    """
    Index of the first occurrence of `needle` at or after `offset`. Returns
    None if not found.

    Examples
    --------
    >>> index_of('fòôbàř', 'bà')
    3
    >>> index_of('fòôbàř', 'z') is None
    True
    >>> index_of('ßtraSSe', 'SS', case_sensitive=False)
    4
    """
    start = normalize(offset, len(text))
    if case_sensitive:
        index = text.find(needle, start)
        return None if index == -1 else index

    match = ignore_case(needle).search(text, start)
    return None if match is None else match.start()


def _last(text, needle, start, stop, case_sensitive):
    # last occurrence starting in the closed range [start, stop]
    if case_sensitive:
        index = text.rfind(needle, start, stop + len(needle))
        return None if index == -1 else index

    pattern = ignore_case(needle)
    index = None
    while start <= stop:
        match = pattern.search(text, start)
        if match is None or match.start() > stop:
            break

        index = match.start()
        start = index + 1

    return index


def index_of_last(text, needle, offset=0, case_sensitive=True):
    """
    Index of the last occurrence of `needle` in `text`, or None if not found.
    A non-negative `offset` only considers occurrences starting at or after
    `offset`. A negative `offset` only considers occurrences starting at or
    before position `len(text) + offset`.

    Examples
    --------
    >>> index_of_last('abcabc', 'b')
    4
    >>> index_of_last('abcabc', 'b', -3)
    1
    """
    size = len(text)
    if offset >= 0:
        return _last(text, needle, min(offset, size), size, case_sensitive)

    stop = size + offset
    if stop < 0:
        return None

    return _last(text, needle, 0, stop, case_sensitive)


def count_substr(text, needle, case_sensitive=True):
    """Number of non-overlapping occurrences of `needle` in `text`."""
    if not needle:
        return 0

    if case_sensitive:
        return text.count(needle)

    return len(ignore_case(needle).findall(text))


def contains(text, needle, case_sensitive=True):
    return index_of(text, needle, 0, case_sensitive) is not None


def contains_any(text, needles, case_sensitive=True):
    return any(contains(text, needle, case_sensitive) for needle in needles)


def contains_all(text, needles, case_sensitive=True):
    needles = list(needles)
    if not needles:
        return False
    return all(contains(text, needle, case_sensitive) for needle in needles)


def between(text, start, end, offset=0):
    """
    Substring between delimiters `start` and `end`, searching from `offset`.
    Empty string if either delimiter is not found.

    Examples
    --------
    >>> between('{foo} and {bar}', '{', '}', 1)
    'bar'
    """
    i = index_of(text, start, offset)
    if i is None:
        return ''

    i += len(start)
    j = index_of(text, end, i)
    if j is None:
        return ''

    return text[i:j]
