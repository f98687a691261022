
# std
from concurrent.futures import ThreadPoolExecutor

# third-party
import pytest

# local
from stringent import InvalidArgument, StringValue, UnsupportedEncoding
from stringent.string import casing, regex
from stringent.testing import Expected, Throws, mock


# ---------------------------------------------------------------------------- #
ENGINES = ('regex', 're')


class StdlibString(StringValue):
    engine = 're'


# ---------------------------------------------------------------------------- #
test_regex_replace = Expected('regex_replace')({
    mock.regex_replace('fòô', 'f[òô]+', 'bàř'):          'bàř',
    mock.regex_replace('fòô', 'f(ò)', r'b\1'):           'bòô',
    mock.regex_replace('fòô bàř', r'\s', ''):            'fòôbàř',
    mock.regex_replace('FOO', 'foo', 'bar'):             'FOO',
    mock.regex_replace('FOO', 'foo', 'bar', 'i'):        'bar',
    mock.regex_replace('a\nb', 'a.b', 'x'):              'x',
    mock.regex_replace('a\nb', 'a.b', 'x', ''):          'a\nb',
    mock.regex_replace('fòô', '[[:alpha:]]', '*'):       '***',
    mock.regex_replace('foo', '(', 'x'):                 Throws(InvalidArgument),
    mock.regex_replace('foo', 'o', 'x', 'q'):            Throws(InvalidArgument),
})


@pytest.mark.parametrize(
    'options, expected',
    [('', set()),
     ('i', {'IGNORECASE'}),
     ('msr', {'DOTALL'}),
     ('ix', {'IGNORECASE', 'VERBOSE'}),
     ('p', {'DOTALL'})]
)
def test_resolve_options(options, expected):
    assert regex.resolve_options(options) == expected


def test_resolve_options_invalid():
    with pytest.raises(InvalidArgument):
        regex.resolve_options('iq')


# ---------------------------------------------------------------------------- #
def test_get_engine():
    assert regex.get_engine().name == 'regex'
    assert regex.get_engine('re') is regex.ENGINES['re']
    assert regex.get_engine(regex.ENGINES['re']) is regex.ENGINES['re']

    with pytest.raises(InvalidArgument):
        regex.get_engine('pcre')


@pytest.mark.parametrize(
    'pattern, translated',
    [('[[:digit:]]', '[0-9]'),
     ('[[:space:]]+', r'[\s]+'),
     ('^[[:xdigit:]]*', '^[0-9A-Fa-f]*'),
     ('no classes', 'no classes')]
)
def test_translate(pattern, translated):
    assert regex.ENGINES['re'].translate(pattern) == translated


def test_translate_unknown_class():
    with pytest.raises(InvalidArgument):
        regex.ENGINES['re'].translate('[[:emoji:]]')


@pytest.mark.parametrize('engine', ENGINES)
@pytest.mark.parametrize(
    'func, text, expected',
    [(casing.is_alpha, 'fòôbàř', True),
     (casing.is_alpha, 'fòô bàř', False),
     (casing.is_alphanumeric, 'fòô42', True),
     (casing.is_upper_case, 'FÒÔBÀŘ', True),
     (casing.is_lower_case, 'fòôbàř', True),
     (casing.has_upper_case, 'fòôBàř', True),
     (casing.has_lower_case, 'FÒÔ', False),
     (casing.is_blank, ' \t\n', True),
     (casing.is_hexadecimal, 'c0ffee', True)]
)
def test_engines_agree(engine, func, text, expected):
    assert func(text, engine=engine) is expected


@pytest.mark.parametrize('engine', ENGINES)
def test_engine_transforms(engine):
    assert casing.dasherize('fòôBàř bàz', engine=engine) == 'fòô-bàř-bàz'
    assert casing.collapse_whitespace('  fòô \n bàř ', engine=engine) == 'fòô bàř'
    assert regex.split(',', 'a,b,c', 2, engine=engine) == ['a', 'b']


def test_stdlib_engine_encodings():
    assert regex.match('f', 'foo', encoding='ascii', engine='re')
    assert regex.match('f', 'foo', encoding='UTF8', engine='re')

    with pytest.raises(UnsupportedEncoding):
        regex.match('f', 'foo', encoding='latin-1', engine='re')

    # the multibyte engine handles any encoding
    assert regex.match('f', 'foo', encoding='latin-1', engine='regex')


def test_value_engine():
    s = StdlibString('fòôBàř')
    assert s.dasherize() == StdlibString('fòô-bàř')
    assert s.is_alpha()

    latin = StdlibString('fòô', 'latin-1')
    with pytest.raises(UnsupportedEncoding):
        latin.is_alpha()

    # non-regex operations are unaffected
    assert str(latin.to_upper_case()) == 'FÒÔ'
    assert StringValue('fòô', 'latin-1').is_alpha()


def test_split_limit():
    assert regex.split(',', 'a,b,c') == ['a', 'b', 'c']
    assert regex.split(',', 'a,b,c', 0) == []
    assert regex.split(',', 'a,b,c', 1) == ['a']
    assert regex.split(',', 'a,b,c', 3) == ['a', 'b', 'c']
    assert regex.split('', 'a,b,c') == ['a,b,c']

    # groups in the pattern do not add items
    for engine in ('regex', 're'):
        assert regex.split('(,)', 'a,b,c', engine=engine) == ['a', 'b', 'c']
        assert regex.split('(,)', 'a,b,c', 2, engine=engine) == ['a', 'b']
        assert regex.split('(x)?,', 'a,b', engine=engine) == ['a', 'b']


def test_concurrent_encodings():
    # per-call encodings do not leak between threads
    def work(i):
        encoding = ('ascii', 'utf-8')[i % 2]
        text = ('foo bar', 'fòô bàř')[i % 2]
        value = StdlibString(text, encoding)
        return value.dasherize(), value.is_alpha()

    with ThreadPoolExecutor(8) as pool:
        results = list(pool.map(work, range(64)))

    for i, (dashed, alpha) in enumerate(results):
        assert str(dashed) == ('foo-bar', 'fòô-bàř')[i % 2]
        assert dashed.encoding == ('ascii', 'utf-8')[i % 2]
        assert alpha is False
