# Flexibly parametrize tests of string value methods

"""
Tools to help building parametrized unit tests for `StringValue` methods.

Examples
--------
To generate a bunch of tests for various call signatures of the `pad` method,
use
>>> from stringent.testing import Expected, Throws, mock
>>> test_pad = Expected('pad')(
...     {mock.pad('foo', 5):                     'foo  ',
...      mock.pad('foo', 5, '¬', side='left'):   '¬¬foo',
...      mock.pad('foo', 5, side='middle'):      Throws(InvalidArgument)}
... )

The first argument of each call is the content of the value that the method is
called on, the remaining arguments are passed to the method. This generates
the same tests as the following code block
>>> @pytest.mark.parametrize(
...     'content, args, kws, expected',
...     [('foo', (5, ), {}, 'foo  '),
...      ('foo', (5, '¬'), {'side': 'left'}, '¬¬foo')]
... )
... def test_pad(content, args, kws, expected):
...     assert str(StringValue(content).pad(*args, **kws)) == expected
"""

# std
import difflib
from contextlib import nullcontext
from collections import abc

# third-party
import pytest

# relative
from .value import StringValue
from .logging import LoggingMixin


# ---------------------------------------------------------------------------- #
def to_tuple(obj):
    return obj if isinstance(obj, tuple) else (obj, )


def plain(obj):
    """Convert (lists of) string values to builtin `str` for comparison."""
    if isinstance(obj, StringValue):
        return str(obj)

    if isinstance(obj, list):
        return [*map(plain, obj)]

    return obj


def show_diff(actual, expected):
    """
    Diff helper function. Returns a string containing the unified diff of two
    multiline strings.
    """

    return '\n'.join(difflib.ndiff(actual.splitlines(True),
                                   expected.splitlines(True)))


# ---------------------------------------------------------------------------- #
class WrapArgs:
    def __init__(self, *args, **kws):
        self.args, self.kws = args, tuple(kws.items())

    def __iter__(self):
        return iter((self.args, dict(self.kws)))

    def __hash__(self):
        return hash((self.args, self.kws))

    def __eq__(self, other):
        return isinstance(other, WrapArgs) and tuple(self) == tuple(other)

    def __str__(self):
        return str((self.args, dict(self.kws)))


class Mock:
    def __getattr__(self, _):
        return WrapArgs

    def __call__(self, *args, **kws):
        return WrapArgs(*args, **kws)


mock = Mock()


class Throws:
    def __init__(self, error=Exception):
        self.error = error

    def __repr__(self):
        return f'Throws({self.error.__name__})'


# ---------------------------------------------------------------------------- #
class Expected(LoggingMixin):
    """
    Testing helper for checking expected return values of `StringValue`
    methods.

    Parameters
    ----------
    method : str
        Name of the method to test.
    transform : callable, optional
        Applied to the method's return value before comparison, by default
        string values are converted to `str`.
    **kws
        Keyword arguments used to construct the `StringValue` under test, eg.
        `encoding`.
    """

    def __init__(self, method, transform=plain, **kws):
        self.method = str(method)
        self.transform = transform
        self.kws = kws

    def __call__(self, cases, *args, **kws):
        """
        Create the test function and parametrize it with `cases`.

        Parameters
        ----------
        cases : dict or iterable of 2-tuples
            (call, expected) pairs, where call is either the content of the
            value under test (method called without arguments), or a call
            signature built via `mock`.

        Returns
        -------
        function
            The parametrized test.
        """
        if isinstance(cases, abc.Mapping):
            cases = cases.items()

        values = []
        for spec, expected in cases:
            if not isinstance(spec, WrapArgs):
                spec = WrapArgs(*to_tuple(spec))

            (content, *params), options = spec
            values.append((content, tuple(params), options, expected))

        return pytest.mark.parametrize('content, args, kws, expected',
                                       values, *args, **kws)(self.make_test())

    def make_test(self):
        # -------------------------------------------------------------------- #
        def test(content, args, kws, expected):
            value = StringValue(content, **self.kws)
            method = getattr(value, self.method)
            self.logger.debug('Calling {!r}.{}(*{}, **{}).', value, self.method,
                              args, kws)

            ctx = nullcontext()
            if isinstance(expected, Throws):
                ctx = pytest.raises(expected.error)

            with ctx:
                result = method(*args, **kws)
                answer = self.transform(result)

            if not isinstance(ctx, nullcontext):
                return

            # string results keep the type and encoding of the original
            if isinstance(result, StringValue):
                assert type(result) is type(value)
                assert result.encoding == value.encoding

            if answer == expected:
                return

            message = (f'Result from method {self.method!r} is not equal to '
                       f'expected answer!'
                       f'\nRESULT:  \n{answer!r}'
                       f'\nEXPECTED:\n{expected!r}')
            if isinstance(answer, str) and isinstance(expected, str):
                diff_string = show_diff(repr(answer), repr(expected))
                message += f'\nDIFF\n{diff_string}'

            raise AssertionError(message)

        # -------------------------------------------------------------------- #
        test.__name__ = f'test_{self.method}'
        return test
