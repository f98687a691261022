"""
Encoding-aware regex match / replace / split.

Two backends are available:

* ``regex``: the third-party multibyte-native engine. POSIX bracket classes
  such as ``[[:alpha:]]`` are understood natively.
* ``re``: the standard library engine. It only handles ASCII and UTF-8 values,
  and POSIX bracket classes are translated to equivalent character sets before
  compilation.

The encoding is passed explicitly with every call. No engine-global setting is
touched, so interleaved use from several threads is safe.
"""

# std
import re
import sys
import codecs
import threading
import functools as ftl

# third-party
import regex
from loguru import logger

# relative
from ..config import CONFIG
from ..logging import LoggingMixin
from ..errors import InvalidArgument, UnsupportedEncoding


# ---------------------------------------------------------------------------- #
# mbregex style option letters -> flag names
OPTION_FLAGS = {
    'i': ('IGNORECASE', ),
    'x': ('VERBOSE', ),
    'm': ('DOTALL', ),      # dot matches newline
    's': (),                # anchors match on the whole string: python default
    'p': ('DOTALL', ),      # 'm' + 's'
    'r': (),                # ruby syntax: nothing to change
}

# POSIX bracket expression classes: [:name:]
RGX_POSIX_CLASS = re.compile(r'\[:(\w+):\]')

#
POSIX_SETS = {
    'space':  r'\s',
    'digit':  '0-9',
    'xdigit': '0-9A-Fa-f',
    'blank':  r' \t',
}
POSIX_PREDICATES = {
    'alpha': str.isalpha,
    'upper': str.isupper,
    'lower': str.islower,
}

# ---------------------------------------------------------------------------- #


def canonical(encoding):
    """
    Canonical codec name for `encoding`, eg: 'UTF8' -> 'utf-8'.

    Raises
    ------
    UnsupportedEncoding
        If the codec is unknown.
    """
    try:
        return codecs.lookup(encoding).name
    except (LookupError, TypeError):
        raise UnsupportedEncoding(f'Unknown text encoding: {encoding!r}.') from None


def resolve_options(options):
    options = CONFIG.regex.options if options is None else str(options)
    names = set()
    for letter in options:
        if letter not in OPTION_FLAGS:
            raise InvalidArgument(f'Unrecognised regex option {letter!r} in '
                                  f'{options!r}. Valid options are: '
                                  f'{"".join(OPTION_FLAGS)!r}.')
        names.update(OPTION_FLAGS[letter])
    return frozenset(names)


# ---------------------------------------------------------------------------- #
def _ranges(predicate):
    # Build the contents of a character set (without the enclosing brackets)
    # containing every codepoint for which `predicate` is true.
    start = previous = None
    parts = []
    for code in range(sys.maxunicode + 1):
        if predicate(chr(code)):
            if start is None:
                start = code
            previous = code
            continue

        if start is not None:
            parts.append(_range(start, previous))
            start = None

    if start is not None:
        parts.append(_range(start, previous))

    return ''.join(parts)


def _range(start, stop):
    if start == stop:
        return f'\\U{start:08x}'
    return f'\\U{start:08x}-\\U{stop:08x}'


class UnicodeSets(LoggingMixin):
    """
    Lazily built character set contents for POSIX classes that have no
    standard library regex equivalent. Each set is computed at most once per
    process.
    """

    def __init__(self, predicates):
        self.predicates = dict(predicates)
        self._sets = {}
        self._lock = threading.Lock()

    def __getitem__(self, name):
        if name in self._sets:
            return self._sets[name]

        with self._lock:
            if name not in self._sets:
                self.logger.debug('Building unicode character set for POSIX '
                                  'class [:{}:].', name)
                self._sets[name] = _ranges(self.predicates[name])

        return self._sets[name]

    def __contains__(self, name):
        return name in self.predicates


unicode_sets = UnicodeSets(POSIX_PREDICATES)


def posix_set(name):
    """Standard library character set contents for POSIX class `name`."""
    if name in POSIX_SETS:
        return POSIX_SETS[name]

    if name in unicode_sets:
        return unicode_sets[name]

    if name == 'alnum':
        return unicode_sets['alpha'] + POSIX_SETS['digit']

    raise InvalidArgument(f'Unsupported POSIX character class: [:{name}:].')


# ---------------------------------------------------------------------------- #
class Engine(LoggingMixin):
    """Base class for regex backends."""

    name = None
    module = None
    encodings = None    # None: any encoding

    def __repr__(self):
        return f'{type(self).__name__}({self.name!r})'

    def check(self, encoding):
        encoding = canonical(encoding)
        if self.encodings is None or encoding in self.encodings:
            return encoding

        raise UnsupportedEncoding(
            f'The {self.name!r} regex engine only supports encodings '
            f'{self.encodings}. Encoding used: {encoding!r}.'
        )

    def translate(self, pattern):
        return pattern

    def flags(self, options, encoding):
        flags = 0
        for name in resolve_options(options):
            flags |= getattr(self.module, name)

        if encoding == 'ascii':
            flags |= self.module.ASCII

        return flags

    def compile(self, pattern, options=None, encoding='utf-8'):
        encoding = self.check(encoding)
        return _compile(self, pattern, self.flags(options, encoding))

    # ------------------------------------------------------------------------ #
    def match(self, pattern, text, options=None, encoding='utf-8'):
        """Whether `pattern` matches at the start of `text`."""
        return self.compile(pattern, options, encoding).match(text) is not None

    def sub(self, pattern, replacement, text, options=None, encoding='utf-8'):
        """
        Replace all occurrences of `pattern` in `text` by `replacement`, which
        may be a template string with back references, or a callable that
        receives the match object.
        """
        return self.compile(pattern, options, encoding).sub(replacement, text)

    def split(self, pattern, text, limit=None, options=None, encoding='utf-8'):
        """
        Split `text` on `pattern`, returning at most `limit` pieces. If `limit`
        is given and the text could be split further, the unsplit remainder is
        discarded. Only the text between matches is returned, capture groups in
        `pattern` do not add items to the result.
        """
        if limit == 0:
            return []

        if not pattern:
            return [text]

        maxsplit = limit if (limit and limit > 0) else 0
        parts, start = [], 0
        for match in self.compile(pattern, options, encoding).finditer(text):
            if maxsplit and len(parts) == maxsplit:
                return parts

            parts.append(text[start:match.start()])
            start = match.end()

        parts.append(text[start:])
        return parts[:maxsplit] if maxsplit else parts


class RegexEngine(Engine):
    name = 'regex'
    module = regex


class StdlibEngine(Engine):
    name = 're'
    module = re
    encodings = ('ascii', 'utf-8')

    def translate(self, pattern):
        return RGX_POSIX_CLASS.sub(self._posix, pattern)

    @staticmethod
    def _posix(match):
        return posix_set(match[1])


@ftl.lru_cache(maxsize=512)
def _compile(engine, pattern, flags):
    engine.logger.debug('Compiling {!r} with flags {}.', pattern, flags)
    try:
        return engine.module.compile(engine.translate(pattern), flags)
    except engine.module.error as err:
        raise InvalidArgument(f'Invalid regex pattern {pattern!r}: {err}') from err


# ---------------------------------------------------------------------------- #
ENGINES = {engine.name: engine for engine in (RegexEngine(), StdlibEngine())}


def get_engine(name=None):
    """
    Get a regex backend by name. The default is set by the `regex.engine` value
    in the package config.
    """
    if isinstance(name, Engine):
        return name

    name = name or CONFIG.regex.engine
    if engine := ENGINES.get(name):
        logger.debug('Using {!r} regex engine.', name)
        return engine

    raise InvalidArgument(f'Unknown regex engine {name!r}. Choose from: '
                          f'{tuple(ENGINES)}.')


def escape(text):
    """Escape `text` for literal use in a pattern, valid for both engines."""
    return re.escape(text)


def match(pattern, text, options=None, encoding='utf-8', engine=None):
    return get_engine(engine).match(pattern, text, options, encoding)


def compile(pattern, options=None, encoding='utf-8', engine=None):
    """Compiled (and cached) `pattern` from the selected backend."""
    return get_engine(engine).compile(pattern, options, encoding)


def sub(pattern, replacement, text, options=None, encoding='utf-8', engine=None):
    return get_engine(engine).sub(pattern, replacement, text, options, encoding)


def split(pattern, text, limit=None, options=None, encoding='utf-8', engine=None):
    return get_engine(engine).split(pattern, text, limit, options, encoding)
