"""
Unicode helpers: ASCII transliteration.
"""

from .transliterate import primary_subtag, tables, to_ascii
