"""
Manipulating string affixes, and longest common prefix, suffix and substring.
"""

# std
import itertools as itt

# third-party
import more_itertools as mit

# relative
from .codepoints import ignore_case


# ---------------------------------------------------------------------------- #
# Prefix / suffix tests

def starts_with(string, prefix, case_sensitive=True):
    if case_sensitive:
        return string.startswith(prefix)
    return ignore_case(prefix).match(string) is not None


def ends_with(string, suffix, case_sensitive=True):
    if case_sensitive:
        return string.endswith(suffix)

    start = len(string) - len(suffix)
    return start >= 0 and ignore_case(suffix).fullmatch(string, start) is not None


def starts_with_any(string, prefixes, case_sensitive=True):
    return any(starts_with(string, prefix, case_sensitive) for prefix in prefixes)


def ends_with_any(string, suffixes, case_sensitive=True):
    return any(ends_with(string, suffix, case_sensitive) for suffix in suffixes)


# ---------------------------------------------------------------------------- #
# Add / remove

def ensure_left(string, prefix):
    """Prepend `prefix` unless `string` already starts with it."""
    return string if string.startswith(prefix) else prefix + string


def ensure_right(string, suffix):
    """Append `suffix` unless `string` already ends with it."""
    return string if string.endswith(suffix) else string + suffix


def remove_affix(string, prefix='', suffix=''):
    for i, affix in enumerate((prefix, suffix)):
        string = _replace_affix(string, affix, '', i)
    return string


def _replace_affix(string, affix, new, i):
    # handles prefix and suffix replace. (i==0: prefix, i==1: suffix)
    if affix and (string.startswith, string.endswith)[i](affix):
        w = (1, -1)[i]
        return ''.join((new, string[slice(*(w * len(affix), None)[::w])])[::w])
    return string


def remove_left(string, prefix):
    """
    Remove `prefix` from `string` if present.

    Examples
    --------
    >>> remove_left('foology', 'foo')
    'logy'
    """
    return remove_affix(string, prefix)


def remove_right(string, suffix):
    return remove_affix(string, '', suffix)


# ---------------------------------------------------------------------------- #
# Longest common affixes

def longest_common_prefix(string, other):
    """
    Longest sequence of leading codepoints shared by `string` and `other`.

    Examples
    --------
    >>> longest_common_prefix('interspecies', 'interstellar')
    'inters'
    """
    n = mit.ilen(itt.takewhile(_same, zip(string, other)))
    return string[:n]


def longest_common_suffix(string, other):
    """
    Longest sequence of trailing codepoints shared by `string` and `other`.

    Examples
    --------
    >>> longest_common_suffix('fòôbàř', 'bàř')
    'bàř'
    """
    n = mit.ilen(itt.takewhile(_same, zip(reversed(string), reversed(other))))
    return string[len(string) - n:]


def _same(pair):
    return pair[0] == pair[1]


def longest_common_substring(string, other):
    """
    Longest contiguous run of codepoints shared by `string` and `other`. In the
    case of ties, the substring that ends earliest in `string` is returned.

    This uses the classic dynamic programming solution, which runs in
    O(len(string) * len(other)) time and memory, so it is not suitable for very
    long inputs.

    Parameters
    ----------
    string, other : str
        Strings to compare.

    Examples
    --------
    >>> longest_common_substring('abcdef', 'zabcex')
    'abc'
    >>> longest_common_substring('fòô', 'bàř')
    ''

    Returns
    -------
    str
    """
    if not (string and other):
        return ''

    size, end = 0, 0
    # table[i][j]: length of the common run ending at string[i - 1], other[j - 1]
    table = [[0] * (len(other) + 1) for _ in range(len(string) + 1)]
    for i, char in enumerate(string, 1):
        previous, row = table[i - 1], table[i]
        for j, letter in enumerate(other, 1):
            if char == letter:
                row[j] = run = previous[j - 1] + 1
                if run > size:
                    size, end = run, i

    return string[end - size:end]
