"""
Case conversion, case predicates, trimming and word delimiting.

Functions that use regular expressions accept the text `encoding` and the
regex `engine` to use. See `stringent.string.regex`.
"""

# relative
from . import regex


# ---------------------------------------------------------------------------- #
REGEX_SPACE = '[:space:]'
REGEX_CAPS = r'\B([[:upper:]])'
REGEX_DELIMITERS = r'[-_\s]+'
REGEX_WORD = r'\S+'
REGEX_TITLE_WORD = r"[[:alnum:]]+(?:['’][[:alnum:]]+)*"

# internal patterns do not depend on the user configured regex options
OPTIONS = 'msr'


# ---------------------------------------------------------------------------- #
# Predicates

def _matches(pattern, string, encoding='utf-8', engine=None):
    return regex.match(pattern, string, OPTIONS, encoding, engine)


def _sub(pattern, replacement, string, encoding='utf-8', engine=None):
    return regex.sub(pattern, replacement, string, OPTIONS, encoding, engine)


def has_lower_case(string, encoding='utf-8', engine=None):
    return _matches('.*[[:lower:]]', string, encoding, engine)


def has_upper_case(string, encoding='utf-8', engine=None):
    return _matches('.*[[:upper:]]', string, encoding, engine)


def is_alpha(string, encoding='utf-8', engine=None):
    return _matches(r'^[[:alpha:]]*\Z', string, encoding, engine)


def is_alphanumeric(string, encoding='utf-8', engine=None):
    return _matches(r'^[[:alnum:]]*\Z', string, encoding, engine)


def is_blank(string, encoding='utf-8', engine=None):
    return _matches(r'^[[:space:]]*\Z', string, encoding, engine)


def is_hexadecimal(string, encoding='utf-8', engine=None):
    return _matches(r'^[[:xdigit:]]*\Z', string, encoding, engine)


def is_lower_case(string, encoding='utf-8', engine=None):
    return _matches(r'^[[:lower:]]*\Z', string, encoding, engine)


def is_upper_case(string, encoding='utf-8', engine=None):
    return _matches(r'^[[:upper:]]*\Z', string, encoding, engine)


# ---------------------------------------------------------------------------- #
# Trimming / whitespace

def _chars(chars):
    return regex.escape(chars) if chars else REGEX_SPACE


def trim(string, chars=None, encoding='utf-8', engine=None):
    """
    Remove whitespace (including multibyte whitespace) from both ends of the
    string, or the characters in `chars` if given.
    """
    chars = _chars(chars)
    return _sub(rf'^[{chars}]+|[{chars}]+\Z', '', string,
                encoding=encoding, engine=engine)


def trim_left(string, chars=None, encoding='utf-8', engine=None):
    return _sub(rf'^[{_chars(chars)}]+', '', string,
                encoding=encoding, engine=engine)


def trim_right(string, chars=None, encoding='utf-8', engine=None):
    return _sub(rf'[{_chars(chars)}]+\Z', '', string,
                encoding=encoding, engine=engine)


def collapse_whitespace(string, encoding='utf-8', engine=None):
    """
    Convert all contiguous whitespace into single space and strip leading and
    trailing spaces.

    Parameters
    ----------
    string : str
        Text to be re-spaced

    Examples
    --------
    >>> collapse_whitespace('  Î     ÏÏÎ³Î³ÏÎ±ÏÎ­Î±Ï  ')
    'Î ÏÏÎ³Î³ÏÎ±ÏÎ­Î±Ï'

    Returns
    -------
    str
        Copy of input string with all contiguous white space replaced with
        single space " ".
    """
    string = _sub('[[:space:]]+', ' ', string,
                  encoding=encoding, engine=engine)
    return trim(string, encoding=encoding, engine=engine)


def strip_whitespace(string, encoding='utf-8', engine=None):
    return _sub('[[:space:]]+', '', string, encoding=encoding, engine=engine)


# ---------------------------------------------------------------------------- #
# Delimiting

def delimit(string, sep, encoding='utf-8', engine=None):
    """
    Lowercase and trim the string, separating words by `sep`. The separator is
    inserted before uppercase characters (except at the start of a word), and
    in place of spaces, dashes and underscores. Alphabetic separators are not
    lowercased.

    Examples
    --------
    >>> delimit('HelloWorld', '-')
    'hello-world'
    >>> delimit('  hello  world_again ', '::')
    'hello::world::again'
    """
    kws = dict(encoding=encoding, engine=engine)
    string = _sub(REGEX_CAPS, r'-\1', trim(string, **kws), **kws)
    return _sub(REGEX_DELIMITERS, lambda _: sep, string.lower(), **kws)


def dasherize(string, encoding='utf-8', engine=None):
    return delimit(string, '-', encoding, engine)


def underscored(string, encoding='utf-8', engine=None):
    return delimit(string, '_', encoding, engine)


# ---------------------------------------------------------------------------- #
# Case transforms

def upper_case_first(string):
    return string[:1].upper() + string[1:]


def lower_case_first(string):
    return string[:1].lower() + string[1:]


def _swap(match):
    char = match[0]
    return char.lower() if char == char.upper() else char.upper()


def swap_case(string, encoding='utf-8', engine=None):
    """
    Flip the case of each non-whitespace character individually.

    Examples
    --------
    >>> swap_case('Î¨ÏÏÎ®')
    'ÏÎ¥Î§Î'
    """
    return _sub(r'\S', _swap, string, encoding=encoding, engine=engine)


def _title_word(match):
    return upper_case_first(match[0].lower())


def to_title_case(string, encoding='utf-8', engine=None):
    """
    Uppercase the first character of each word, and lowercase the rest. Words
    are runs of letters and digits, so punctuation also separates words.

    Examples
    --------
    >>> to_title_case('hello-world foo_bar')
    'Hello-World Foo_Bar'
    """
    return _sub(REGEX_TITLE_WORD, _title_word, string,
                encoding=encoding, engine=engine)


def titleize(string, ignore=None, encoding='utf-8', engine=None):
    """
    Trimmed string with the first letter of each word capitalized, except for
    words in `ignore`.

    Parameters
    ----------
    string : str
        String to convert to titlecase.
    ignore : collection of str, optional
        These words of the string will not be title cased.

    Examples
    --------
    >>> titleize('the quick brown fox', ['the', 'quick'])
    'the quick Brown Fox'
    """
    if isinstance(ignore, str):
        ignore = [ignore]

    ignore = set(ignore or ())

    def title(match):
        word = match[0]
        return word if word in ignore else _title_word(match)

    string = _sub(REGEX_WORD, title, string, encoding=encoding, engine=engine)
    return trim(string, encoding=encoding, engine=engine)


def humanize(string, encoding='utf-8', engine=None):
    """
    Capitalize the first word, replace underscores with spaces and remove
    '_id'.

    Examples
    --------
    >>> humanize('author_id')
    'Author'
    """
    string = string.replace('_id', '').replace('_', ' ')
    return upper_case_first(trim(string, encoding=encoding, engine=engine))


# aliases
monospaced = collapse_whitespace
kebab_case = dasherize
snake_case = underscored
