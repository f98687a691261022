
# std
import copy
import pickle

# third-party
import pytest

# local
from stringent import (ImmutableViolation, InvalidArgument, OutOfBounds,
                       StringValue, UnsupportedEncoding, create)


# ---------------------------------------------------------------------------- #
class Named:
    def __str__(self):
        return 'named'


class Subclass(StringValue):
    pass


@pytest.fixture
def fooBar():
    return StringValue('fòôbàř')


# ---------------------------------------------------------------------------- #
# Construction

@pytest.mark.parametrize(
    'content, expected',
    [(None, ''),
     ('', ''),
     ('fòôbàř', 'fòôbàř'),
     (42, '42'),
     (3.5, '3.5'),
     (Named(), 'named'),
     (StringValue('fòô'), 'fòô'),
     ('fòô'.encode(), 'fòô'),
     (bytearray(b'foo'), 'foo')]
)
def test_init(content, expected):
    assert str(StringValue(content)) == expected


@pytest.mark.parametrize('content', [object(), [1, 2], ('a', ), {'a': 1}, {1}])
def test_init_no_text(content):
    with pytest.raises(InvalidArgument):
        StringValue(content)


def test_init_defaults():
    s = StringValue()
    assert s.encoding == s.get_encoding() == 'utf-8'
    assert s.language == s.get_language() == 'en'
    assert len(s) == 0
    assert not s


@pytest.mark.parametrize(
    'encoding, expected',
    [('UTF8', 'utf-8'),
     ('utf_8', 'utf-8'),
     ('ASCII', 'ascii'),
     ('latin-1', 'iso8859-1')]
)
def test_encoding_canonical(encoding, expected):
    assert StringValue('foo', encoding).encoding == expected


def test_unknown_encoding():
    with pytest.raises(UnsupportedEncoding):
        StringValue('foo', 'klingon')

    # catchable by the builtin type too
    with pytest.raises(LookupError):
        StringValue('foo', 'klingon')


def test_unrepresentable_content():
    with pytest.raises(InvalidArgument):
        StringValue('fòô', 'ascii')

    with pytest.raises(InvalidArgument):
        StringValue(b'\xff', 'utf-8')


def test_invalid_language():
    with pytest.raises(InvalidArgument):
        StringValue('foo', language='')


def test_create():
    assert create('foo') == StringValue('foo')
    assert StringValue.create() == StringValue('')
    assert StringValue.create('foo', 'ascii').encoding == 'ascii'
    assert type(Subclass.create('foo')) is Subclass


# ---------------------------------------------------------------------------- #
# Immutability

def test_set_attribute(fooBar):
    with pytest.raises(ImmutableViolation):
        fooBar._str = 'bar'

    with pytest.raises(ImmutableViolation):
        fooBar.encoding = 'ascii'

    with pytest.raises(ImmutableViolation):
        del fooBar._str

    assert str(fooBar) == 'fòôbàř'


def test_set_item(fooBar):
    with pytest.raises(ImmutableViolation):
        fooBar[0] = 'b'

    with pytest.raises(TypeError):
        fooBar[0] = 'b'

    with pytest.raises(ImmutableViolation):
        del fooBar[0]

    assert str(fooBar) == 'fòôbàř'


def test_operations_leave_original(fooBar):
    fooBar.to_upper_case().pad(20).append('x').reverse()
    assert str(fooBar) == 'fòôbàř'


# ---------------------------------------------------------------------------- #
# Indexing / iteration

@pytest.mark.parametrize('index, expected', [(0, 'f'), (2, 'ô'), (-1, 'ř'),
                                             (-6, 'f')])
def test_getitem(fooBar, index, expected):
    assert fooBar[index] == StringValue(expected)


@pytest.mark.parametrize('index', [6, 100, -7])
def test_getitem_out_of_bounds(fooBar, index):
    with pytest.raises(OutOfBounds):
        fooBar[index]

    with pytest.raises(IndexError):
        fooBar[index]


def test_getitem_invalid(fooBar):
    with pytest.raises(InvalidArgument):
        fooBar['a']


def test_getitem_slice(fooBar):
    assert fooBar[1:3] == StringValue('òô')
    assert fooBar[::-1] == fooBar.reverse()


def test_iter(fooBar):
    assert [str(char) for char in fooBar] == list('fòôbàř')
    # restartable
    assert list(fooBar) == list(fooBar)
    assert all(isinstance(char, StringValue) for char in fooBar)
    assert [*map(str, reversed(fooBar))] == list('řàbôòf')


def test_contains(fooBar):
    assert 'ôbà' in fooBar
    assert StringValue('bàř') in fooBar
    assert 'x' not in fooBar


def test_chars(fooBar):
    assert fooBar.chars() == list('fòôbàř')
    assert StringValue().chars() == []


def test_length(fooBar):
    assert len(fooBar) == fooBar.length() == fooBar.count() == 6
    assert bytes(fooBar) == 'fòôbàř'.encode('utf-8')
    assert len(bytes(fooBar)) == 10


@pytest.mark.parametrize('index, expected',
                         [(0, True), (5, True), (6, False), (-6, True),
                          (-7, False)])
def test_offset_exists(fooBar, index, expected):
    assert fooBar.offset_exists(index) is expected


# ---------------------------------------------------------------------------- #
# Comparison / representation

def test_equality():
    assert StringValue('foo') == StringValue('foo')
    assert StringValue('foo') != StringValue('bar')
    assert StringValue('foo') != 'foo'
    assert StringValue('foo', 'ascii') != StringValue('foo', 'utf-8')
    assert hash(StringValue('foo')) == hash(StringValue('foo'))
    assert len({StringValue('foo'), StringValue('foo'), StringValue('bar')}) == 2


def test_ordering():
    assert StringValue('a') < StringValue('b') <= StringValue('b')
    assert sorted(map(StringValue, 'cab')) == [*map(StringValue, 'abc')]
    with pytest.raises(TypeError):
        StringValue('a') < 'b'


def test_repr_format(fooBar):
    assert repr(fooBar) == "StringValue('fòôbàř', encoding='utf-8')"
    assert f'{StringValue("ab"):>4}' == '  ab'
    assert str(fooBar) == 'fòôbàř'


def test_operators(fooBar):
    assert fooBar + 'x' == StringValue('fòôbàřx')
    assert 'x' + fooBar == StringValue('xfòôbàř')
    assert fooBar + StringValue('x') == StringValue('fòôbàřx')
    assert StringValue('ab') * 2 == 2 * StringValue('ab') == StringValue('abab')

    with pytest.raises(TypeError):
        fooBar + 1


def test_pickle(fooBar):
    s = StringValue('fòô', 'utf-8', 'de')
    clone = pickle.loads(pickle.dumps(s))
    assert clone == s
    assert clone.language == 'de'
    assert copy.copy(fooBar) == copy.deepcopy(fooBar) == fooBar


# ---------------------------------------------------------------------------- #
# Derived values

def test_derived_keeps_type_encoding():
    s = Subclass('foo bar', 'ascii', 'de')
    for result in (s.to_upper_case(), s.pad(10), s[1:], s.split(' ')[0],
                   s.regex_replace('o+', '0'), s.to_ascii()):
        assert type(result) is Subclass
        assert result.encoding == 'ascii'
        assert result.language == 'de'


def test_derived_must_be_representable():
    with pytest.raises(InvalidArgument):
        StringValue('foo', 'ascii').append('bàř')


def test_chaining():
    s = StringValue('  Ο     συγγραφέας  ')
    assert str(s.collapse_whitespace().to_upper_case().surround('|')) == \
        '|Ο ΣΥΓΓΡΑΦΈΑΣ|'


def test_to_ascii_language():
    assert str(StringValue('äöü', language='de').to_ascii()) == 'aeoeue'
    assert str(StringValue('äöü', language='de').to_ascii('en')) == 'aou'
    assert str(StringValue('äöü').to_ascii('de_AT')) == 'aeoeue'
