"""
ASCII transliteration of non-ASCII text.

The tables map an ASCII target (a character or a short cluster) to the
non-ASCII characters that should collapse onto it. A second, per-language table
holds substitutions that take precedence over the generic ones, eg. German 'ä'
becomes 'ae' rather than 'a'.

Both tables are built on first use, exactly once per process, and are read-only
afterwards.
"""

# std
import re
import threading
from types import MappingProxyType

# relative
from ...logging import LoggingMixin


# ---------------------------------------------------------------------------- #
# language tags are accepted as eg: 'de', 'de_DE', 'de-DE'
RGX_LANGUAGE_SEP = re.compile(r'[-_]')

# everything outside printable ascii
RGX_UNSUPPORTED = re.compile(r'[^\x20-\x7E]')

# exotic spaces
SPACES = ('\u00a0', '\u2000', '\u2001', '\u2002', '\u2003', '\u2004',
          '\u2005', '\u2006', '\u2007', '\u2008', '\u2009', '\u200a',
          '\u202f', '\u205f', '\u3000', '\uffa0')


# ---------------------------------------------------------------------------- #
def _generic_table():
    # Order matters: replacements are applied key by key in this order, so a
    # source listed under more than one key maps to the first.
    return {
        '0': ('°', '₀', '۰', '０'),
        '1': ('¹', '₁', '۱', '１'),
        '2': ('²', '₂', '۲', '２'),
        '3': ('³', '₃', '۳', '３'),
        '4': ('⁴', '₄', '۴', '٤', '４'),
        '5': ('⁵', '₅', '۵', '٥', '５'),
        '6': ('⁶', '₆', '۶', '٦', '６'),
        '7': ('⁷', '₇', '۷', '７'),
        '8': ('⁸', '₈', '۸', '８'),
        '9': ('⁹', '₉', '۹', '９'),
        'a': ('à', 'á', 'ả', 'ã', 'ạ', 'ă', 'ắ', 'ằ', 'ẳ', 'ẵ',
            'ặ', 'â', 'ấ', 'ầ', 'ẩ', 'ẫ', 'ậ', 'ā', 'ą', 'å',
            'α', 'ά', 'ἀ', 'ἁ', 'ἂ', 'ἃ', 'ἄ', 'ἅ', 'ἆ', 'ἇ',
            'ᾀ', 'ᾁ', 'ᾂ', 'ᾃ', 'ᾄ', 'ᾅ', 'ᾆ', 'ᾇ', 'ὰ', 'ά',
            'ᾰ', 'ᾱ', 'ᾲ', 'ᾳ', 'ᾴ', 'ᾶ', 'ᾷ', 'а', 'أ', 'အ',
            'ာ', 'ါ', 'ǻ', 'ǎ', 'ª', 'ა', 'अ', 'ا', 'ａ', 'ä'),
        'b': ('б', 'β', 'ب', 'ဗ', 'ბ', 'ｂ'),
        'c': ('ç', 'ć', 'č', 'ĉ', 'ċ', 'ｃ'),
        'd': ('ď', 'ð', 'đ', 'ƌ', 'ȡ', 'ɖ', 'ɗ', 'ᵭ', 'ᶁ', 'ᶑ',
            'д', 'δ', 'د', 'ض', 'ဍ', 'ဒ', 'დ', 'ｄ'),
        'e': ('é', 'è', 'ẻ', 'ẽ', 'ẹ', 'ê', 'ế', 'ề', 'ể', 'ễ',
            'ệ', 'ë', 'ē', 'ę', 'ě', 'ĕ', 'ė', 'ε', 'έ', 'ἐ',
            'ἑ', 'ἒ', 'ἓ', 'ἔ', 'ἕ', 'ὲ', 'έ', 'е', 'ё', 'э',
            'є', 'ə', 'ဧ', 'ေ', 'ဲ', 'ე', 'ए', 'إ', 'ئ', 'ｅ'),
        'f': ('ф', 'φ', 'ف', 'ƒ', 'ფ', 'ｆ'),
        'g': ('ĝ', 'ğ', 'ġ', 'ģ', 'г', 'ґ', 'γ', 'ဂ', 'გ', 'گ',
            'ｇ'),
        'h': ('ĥ', 'ħ', 'η', 'ή', 'ح', 'ه', 'ဟ', 'ှ', 'ჰ', 'ｈ'),
        'i': ('í', 'ì', 'ỉ', 'ĩ', 'ị', 'î', 'ï', 'ī', 'ĭ', 'į',
            'ı', 'ι', 'ί', 'ϊ', 'ΐ', 'ἰ', 'ἱ', 'ἲ', 'ἳ', 'ἴ',
            'ἵ', 'ἶ', 'ἷ', 'ὶ', 'ί', 'ῐ', 'ῑ', 'ῒ', 'ΐ', 'ῖ',
            'ῗ', 'і', 'ї', 'и', 'ဣ', 'ိ', 'ီ', 'ည်', 'ǐ', 'ი',
            'इ', 'ی', 'ｉ'),
        'j': ('ĵ', 'ј', 'Ј', 'ჯ', 'ج', 'ｊ'),
        'k': ('ķ', 'ĸ', 'к', 'κ', 'Ķ', 'ق', 'ك', 'က', 'კ', 'ქ',
            'ک', 'ｋ'),
        'l': ('ł', 'ľ', 'ĺ', 'ļ', 'ŀ', 'л', 'λ', 'ل', 'လ', 'ლ',
            'ｌ'),
        'm': ('м', 'μ', 'م', 'မ', 'მ', 'ｍ'),
        'n': ('ñ', 'ń', 'ň', 'ņ', 'ŉ', 'ŋ', 'ν', 'н', 'ن', 'န',
            'ნ', 'ｎ'),
        'o': ('ó', 'ò', 'ỏ', 'õ', 'ọ', 'ô', 'ố', 'ồ', 'ổ', 'ỗ',
            'ộ', 'ơ', 'ớ', 'ờ', 'ở', 'ỡ', 'ợ', 'ø', 'ō', 'ő',
            'ŏ', 'ο', 'ὀ', 'ὁ', 'ὂ', 'ὃ', 'ὄ', 'ὅ', 'ὸ', 'ό',
            'о', 'و', 'θ', 'ို', 'ǒ', 'ǿ', 'º', 'ო', 'ओ', 'ｏ',
            'ö'),
        'p': ('п', 'π', 'ပ', 'პ', 'پ', 'ｐ'),
        'q': ('ყ', 'ｑ'),
        'r': ('ŕ', 'ř', 'ŗ', 'р', 'ρ', 'ر', 'რ', 'ｒ'),
        's': ('ś', 'š', 'ş', 'с', 'σ', 'ș', 'ς', 'س', 'ص', 'စ',
            'ſ', 'ს', 'ｓ'),
        't': ('ť', 'ţ', 'т', 'τ', 'ț', 'ت', 'ط', 'ဋ', 'တ', 'ŧ',
            'თ', 'ტ', 'ｔ'),
        'u': ('ú', 'ù', 'ủ', 'ũ', 'ụ', 'ư', 'ứ', 'ừ', 'ử', 'ữ',
            'ự', 'û', 'ū', 'ů', 'ű', 'ŭ', 'ų', 'µ', 'у', 'ဉ',
            'ု', 'ူ', 'ǔ', 'ǖ', 'ǘ', 'ǚ', 'ǜ', 'უ', 'उ', 'ｕ',
            'ў', 'ü'),
        'v': ('в', 'ვ', 'ϐ', 'ｖ'),
        'w': ('ŵ', 'ω', 'ώ', 'ဝ', 'ွ', 'ｗ'),
        'x': ('χ', 'ξ', 'ｘ'),
        'y': ('ý', 'ỳ', 'ỷ', 'ỹ', 'ỵ', 'ÿ', 'ŷ', 'й', 'ы', 'υ',
            'ϋ', 'ύ', 'ΰ', 'ي', 'ယ', 'ｙ'),
        'z': ('ź', 'ž', 'ż', 'з', 'ζ', 'ز', 'ဇ', 'ზ', 'ｚ'),
        'aa': ('ع', 'आ', 'آ'),
        'ae': ('æ', 'ǽ'),
        'ai': ('ऐ', ),
        'ch': ('ч', 'ჩ', 'ჭ', 'چ'),
        'dj': ('ђ', 'đ'),
        'dz': ('џ', 'ძ'),
        'ei': ('ऍ', ),
        'gh': ('غ', 'ღ'),
        'ii': ('ई', ),
        'ij': ('ĳ', ),
        'kh': ('х', 'خ', 'ხ'),
        'lj': ('љ', ),
        'nj': ('њ', ),
        'oe': ('œ', 'ؤ'),
        'oi': ('ऑ', ),
        'oii': ('ऒ', ),
        'ps': ('ψ', ),
        'sh': ('ш', 'შ', 'ش'),
        'shch': ('щ', ),
        'ss': ('ß', ),
        'sx': ('ŝ', ),
        'th': ('þ', 'ϑ', 'ث', 'ذ', 'ظ'),
        'ts': ('ц', 'ც', 'წ'),
        'uu': ('ऊ', ),
        'ya': ('я', ),
        'yu': ('ю', ),
        'zh': ('ж', 'ჟ', 'ژ'),
        '(c)': ('©', ),
        'A': ('Á', 'À', 'Ả', 'Ã', 'Ạ', 'Ă', 'Ắ', 'Ằ', 'Ẳ', 'Ẵ',
            'Ặ', 'Â', 'Ấ', 'Ầ', 'Ẩ', 'Ẫ', 'Ậ', 'Å', 'Ā', 'Ą',
            'Α', 'Ά', 'Ἀ', 'Ἁ', 'Ἂ', 'Ἃ', 'Ἄ', 'Ἅ', 'Ἆ', 'Ἇ',
            'ᾈ', 'ᾉ', 'ᾊ', 'ᾋ', 'ᾌ', 'ᾍ', 'ᾎ', 'ᾏ', 'Ᾰ', 'Ᾱ',
            'Ὰ', 'Ά', 'ᾼ', 'А', 'Ǻ', 'Ǎ', 'Ａ', 'Ä'),
        'B': ('Б', 'Β', 'ब', 'Ｂ'),
        'C': ('Ç', 'Ć', 'Č', 'Ĉ', 'Ċ', 'Ｃ'),
        'D': ('Ď', 'Ð', 'Đ', 'Ɖ', 'Ɗ', 'Ƌ', 'ᴅ', 'ᴆ', 'Д', 'Δ',
            'Ｄ'),
        'E': ('É', 'È', 'Ẻ', 'Ẽ', 'Ẹ', 'Ê', 'Ế', 'Ề', 'Ể', 'Ễ',
            'Ệ', 'Ë', 'Ē', 'Ę', 'Ě', 'Ĕ', 'Ė', 'Ε', 'Έ', 'Ἐ',
            'Ἑ', 'Ἒ', 'Ἓ', 'Ἔ', 'Ἕ', 'Έ', 'Ὲ', 'Е', 'Ё', 'Э',
            'Є', 'Ə', 'Ｅ'),
        'F': ('Ф', 'Φ', 'Ｆ'),
        'G': ('Ğ', 'Ġ', 'Ģ', 'Г', 'Ґ', 'Γ', 'Ｇ'),
        'H': ('Η', 'Ή', 'Ħ', 'Ｈ'),
        'I': ('Í', 'Ì', 'Ỉ', 'Ĩ', 'Ị', 'Î', 'Ï', 'Ī', 'Ĭ', 'Į',
            'İ', 'Ι', 'Ί', 'Ϊ', 'Ἰ', 'Ἱ', 'Ἳ', 'Ἴ', 'Ἵ', 'Ἶ',
            'Ἷ', 'Ῐ', 'Ῑ', 'Ὶ', 'Ί', 'И', 'І', 'Ї', 'Ǐ', 'ϒ',
            'Ｉ'),
        'J': ('Ｊ', ),
        'K': ('К', 'Κ', 'Ｋ'),
        'L': ('Ĺ', 'Ł', 'Л', 'Λ', 'Ļ', 'Ľ', 'Ŀ', 'ल', 'Ｌ'),
        'M': ('М', 'Μ', 'Ｍ'),
        'N': ('Ń', 'Ñ', 'Ň', 'Ņ', 'Ŋ', 'Н', 'Ν', 'Ｎ'),
        'O': ('Ó', 'Ò', 'Ỏ', 'Õ', 'Ọ', 'Ô', 'Ố', 'Ồ', 'Ổ', 'Ỗ',
            'Ộ', 'Ơ', 'Ớ', 'Ờ', 'Ở', 'Ỡ', 'Ợ', 'Ø', 'Ō', 'Ő',
            'Ŏ', 'Ο', 'Ό', 'Ὀ', 'Ὁ', 'Ὂ', 'Ὃ', 'Ὄ', 'Ὅ', 'Ὸ',
            'Ό', 'О', 'Θ', 'Ө', 'Ǒ', 'Ǿ', 'Ｏ', 'Ö'),
        'P': ('П', 'Π', 'Ｐ'),
        'Q': ('Ｑ', ),
        'R': ('Ř', 'Ŕ', 'Р', 'Ρ', 'Ŗ', 'Ｒ'),
        'S': ('Ş', 'Ŝ', 'Ș', 'Š', 'Ś', 'С', 'Σ', 'Ｓ'),
        'T': ('Ť', 'Ţ', 'Ŧ', 'Ț', 'Т', 'Τ', 'Ｔ'),
        'U': ('Ú', 'Ù', 'Ủ', 'Ũ', 'Ụ', 'Ư', 'Ứ', 'Ừ', 'Ử', 'Ữ',
            'Ự', 'Û', 'Ū', 'Ů', 'Ű', 'Ŭ', 'Ų', 'У', 'Ǔ', 'Ǖ',
            'Ǘ', 'Ǚ', 'Ǜ', 'Ｕ', 'Ў', 'Ü'),
        'V': ('В', 'Ｖ'),
        'W': ('Ω', 'Ώ', 'Ŵ', 'Ｗ'),
        'X': ('Χ', 'Ξ', 'Ｘ'),
        'Y': ('Ý', 'Ỳ', 'Ỷ', 'Ỹ', 'Ỵ', 'Ÿ', 'Ῠ', 'Ῡ', 'Ὺ', 'Ύ',
            'Ы', 'Й', 'Υ', 'Ϋ', 'Ŷ', 'Ｙ'),
        'Z': ('Ź', 'Ž', 'Ż', 'З', 'Ζ', 'Ｚ'),
        'AE': ('Æ', 'Ǽ'),
        'Ch': ('Ч', ),
        'Dj': ('Ђ', ),
        'Dz': ('Џ', ),
        'Gx': ('Ĝ', ),
        'Hx': ('Ĥ', ),
        'Ij': ('Ĳ', ),
        'Jx': ('Ĵ', ),
        'Kh': ('Х', ),
        'Lj': ('Љ', ),
        'Nj': ('Њ', ),
        'Oe': ('Œ', ),
        'Ps': ('Ψ', ),
        'Sh': ('Ш', ),
        'Shch': ('Щ', ),
        'Ss': ('ẞ', ),
        'Th': ('Þ', ),
        'Ts': ('Ц', ),
        'Ya': ('Я', ),
        'Yu': ('Ю', ),
        'Zh': ('Ж', ),
        ' ': SPACES,
    }


def _language_tables():
    return {
        'de': {
            'ä': 'ae', 'ö': 'oe', 'ü': 'ue',
            'Ä': 'AE', 'Ö': 'OE', 'Ü': 'UE'
        },
        'bg': {
            'х': 'h', 'Х': 'H',
            'щ': 'sht', 'Щ': 'SHT',
            'ъ': 'a', 'Ъ': 'A',
            'ь': 'y', 'Ь': 'Y'
        },
    }


# ---------------------------------------------------------------------------- #
def primary_subtag(language):
    """
    Primary language subtag, lower case.

    Examples
    --------
    >>> primary_subtag('de-AT')
    'de'
    """
    return RGX_LANGUAGE_SEP.split(str(language), 1)[0].lower()


class TransliterationTables(LoggingMixin):
    """
    Lazily constructed, process-wide, read-only transliteration tables.
    Initialization is guarded by a lock so concurrent first access builds each
    table once only.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._generic = None
        self._languages = None

    def _init(self):
        # double-checked: only the first caller builds the tables
        with self._lock:
            if self._generic is not None:
                return

            self.logger.debug('Building transliteration tables.')
            self._languages = MappingProxyType({
                lang: MappingProxyType(table)
                for lang, table in _language_tables().items()
            })
            generic = {key: tuple(sources)
                       for key, sources in _generic_table().items()}
            self._generic = MappingProxyType(generic)
            self.logger.debug('Transliteration tables ready: {} targets, {} '
                              'languages.', len(generic), len(self._languages))

    @property
    def generic(self):
        if self._generic is None:
            self._init()
        return self._generic

    @property
    def languages(self):
        if self._generic is None:
            self._init()
        return self._languages

    def language(self, language):
        """
        Language-specific substitutions for `language`. Empty if the language
        has no dedicated table.
        """
        return self.languages.get(primary_subtag(language), MappingProxyType({}))

    def transliterate(self, text, language='en', remove_unsupported=True):
        # language-specific first, so the generic pass cannot consume the same
        # characters with a lower-fidelity mapping
        for source, target in self.language(language).items():
            text = text.replace(source, target)

        for target, sources in self.generic.items():
            for source in sources:
                text = text.replace(source, target)

        if remove_unsupported:
            text = RGX_UNSUPPORTED.sub('', text)

        return text


# ---------------------------------------------------------------------------- #
tables = TransliterationTables()


def to_ascii(text, language='en', remove_unsupported=True):
    """
    ASCII version of `text`. Non-ASCII characters are replaced with their
    closest ASCII counterparts, and the rest are removed by default.

    Parameters
    ----------
    text : str
        Text to transliterate.
    language : str, optional
        Language of the source string in any of the forms 'de', 'de_DE' or
        'de-DE'. Language-specific substitutions are applied first.
    remove_unsupported : bool, optional
        Whether to remove all remaining characters outside the printable ASCII
        range.

    Examples
    --------
    >>> to_ascii('fòô bàř')
    'foo bar'
    >>> to_ascii('äöü', 'de')
    'aeoeue'

    Returns
    -------
    str
    """
    return tables.transliterate(text, language, remove_unsupported)
