"""
Codepoint-aware string operations on plain `str` objects.
"""

from . import regex, unicode
from .entities import HtmlFlags, html_decode, html_encode
from .justify import pad, pad_both, pad_left, pad_right
from .codepoints import (at, between, contains, contains_all, contains_any,
                         count_substr, first, index_of, index_of_last, last,
                         offset_exists, slice_, substr)
from .affixes import (ends_with, ends_with_any, ensure_left, ensure_right,
                      longest_common_prefix, longest_common_substring,
                      longest_common_suffix, remove_affix, remove_left,
                      remove_right, starts_with, starts_with_any)
from .casing import (collapse_whitespace, dasherize, delimit, humanize,
                     kebab_case, lower_case_first, monospaced, snake_case,
                     swap_case, titleize, to_title_case, trim, trim_left,
                     trim_right, underscored, upper_case_first)
from .utils import (insert, is_base64, is_json, is_serialized, repeat, reverse,
                    safe_truncate, shuffle, surround, tidy, to_spaces, to_tabs,
                    truncate)

# alias
to_ascii = unicode.to_ascii
