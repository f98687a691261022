
# local
from stringent.testing import Expected, mock


# ---------------------------------------------------------------------------- #
test_starts_with = Expected('starts_with')({
    mock.starts_with('foo bars', 'foo'):                True,
    mock.starts_with('FOO bars', 'foo'):                False,
    mock.starts_with('FOO bars', 'foo bar', False):     True,
    mock.starts_with('fòôbàř', 'fòô'):                  True,
    mock.starts_with('fòôbàř', 'FÒÔ', False):           True,
    mock.starts_with('ßtraße', 'SS', False):            False,
})

test_starts_with_any = Expected('starts_with_any')({
    mock.starts_with_any('foo bars', ('bar', 'foo')):           True,
    mock.starts_with_any('foo bars', ('bar', 'baz')):           False,
    mock.starts_with_any('FÒÔ bàřs', ('foo', 'fòô'), False):    True,
    mock.starts_with_any('foo bars', ()):                       False,
})

test_ends_with = Expected('ends_with')({
    mock.ends_with('foo bars', 'bars'):             True,
    mock.ends_with('foo BARS', 'bars'):             False,
    mock.ends_with('foo BARS', 'bars', False):      True,
    mock.ends_with('fòôbàř', 'bàř'):                True,
    mock.ends_with('fòôß', 'ÔSS', False):           False,
    mock.ends_with('fòôß', 'Ôß', False):            True,
})

test_ends_with_any = Expected('ends_with_any')({
    mock.ends_with_any('foo bars', ('foo', 'bars')):    True,
    mock.ends_with_any('foo bars', ('foo', 'baz')):     False,
    mock.ends_with_any('fòô BÀŘS', ('bàřs', ), False):  True,
})

test_ensure_left = Expected('ensure_left')({
    mock.ensure_left('foobar', 'f'):        'foobar',
    mock.ensure_left('bar', 'foo'):         'foobar',
    mock.ensure_left('bàř', 'fòô'):         'fòôbàř',
    mock.ensure_left('fòôbàř', 'fòô'):      'fòôbàř',
})

test_ensure_right = Expected('ensure_right')({
    mock.ensure_right('foobar', 'r'):       'foobar',
    mock.ensure_right('foo', 'bar'):        'foobar',
    mock.ensure_right('fòô', 'bàř'):        'fòôbàř',
})

test_remove_left = Expected('remove_left')({
    mock.remove_left('foobar', 'foo'):      'bar',
    mock.remove_left('foobar', 'bar'):      'foobar',
    mock.remove_left('fòôbàř', 'fòô'):      'bàř',
    mock.remove_left('fòôbàř', ''):         'fòôbàř',
})

test_remove_right = Expected('remove_right')({
    mock.remove_right('foobar', 'bar'):     'foo',
    mock.remove_right('foobar', 'foo'):     'foobar',
    mock.remove_right('fòôbàř', 'bàř'):     'fòô',
    mock.remove_right('fòôbàř', ''):        'fòôbàř',
})

test_surround = Expected('surround')({
    mock.surround('foo', '*'):      '*foo*',
    mock.surround('fòô', 'ß'):      'ßfòôß',
    mock.surround('', '--'):        '----',
})

# ---------------------------------------------------------------------------- #
test_longest_common_prefix = Expected('longest_common_prefix')({
    mock.longest_common_prefix('foobar', 'foo bar'):        'foo',
    mock.longest_common_prefix('fòôbàř', 'fòô bàř'):        'fòô',
    mock.longest_common_prefix('interspecies', 'interstellar'):  'inters',
    mock.longest_common_prefix('fòô', 'bàř'):               '',
    mock.longest_common_prefix('', 'foo'):                  '',
})

test_longest_common_suffix = Expected('longest_common_suffix')({
    mock.longest_common_suffix('fòôbàř', 'fòô bàř'):        'bàř',
    mock.longest_common_suffix('foobar', 'bar'):            'bar',
    mock.longest_common_suffix('fòô', 'bàř'):               '',
    mock.longest_common_suffix('', 'foo'):                  '',
})

test_longest_common_substring = Expected('longest_common_substring')({
    mock.longest_common_substring('foobar', 'boofar'):      'oo',
    mock.longest_common_substring('fòôbàř', 'bàř fòô'):     'fòô',
    mock.longest_common_substring('abcdef', 'zabcex'):      'abc',
    mock.longest_common_substring('fòô', 'bàř'):           '',
    mock.longest_common_substring('', 'foo'):              '',
    mock.longest_common_substring('foo', 'foo'):           'foo',
})
