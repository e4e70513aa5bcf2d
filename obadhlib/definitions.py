"""Immutable lookup tables shared by the segmenters and the renderer"""
import logging
from collections import namedtuple
from types import MappingProxyType

from .data import DATA
from .errors import DefinitionError

logger = logging.getLogger(__name__)

# independent: standalone glyph; dependent: kar drawn after a consonant or None
Vowel = namedtuple("Vowel", ["independent", "dependent"])


def _longest_first(keys):
    return tuple(sorted(keys, key=len, reverse=True))


class Definitions(object):
    """Read-only view over the Roman to Bengali tables.

    Built once from a ``DATA``-shaped dict and passed by reference to
    every stage of the pipeline. Nothing here changes after construction,
    so one instance can be shared between threads.
    """

    _default = None

    def __init__(self, data=None):
        if data is None:
            data = DATA
        self.consonants = self._table(data, "CONSONANTS")
        self.vowels = self._vowel_table(data)
        self.diacritics = self._table(data, "DIACRITICS")
        self.special_rules = self._table(data, "SPECIAL_RULES")
        self.symbols = self._table(data, "SYMBOLS")
        self.numerals = self._table(data, "NUMERALS")
        self.folas = self._table(data, "FOLAS")

        self.hasant_key = data["HASANT"]
        self.reph_key = data["REPH"]
        self.reph_glyph = data["REPH_GLYPH"]
        self.chandrabindu_key = data["CHANDRABINDU"]
        self.visarga_key = data["VISARGA"]
        self.anusvara_key = data["ANUSVARA"]
        self.terminator_key = data["TERMINATOR"]
        self.vocalic_r_key = data["VOCALIC_R"]
        self.khanda_ta_keys = frozenset(
            k for k in self.diacritics if k.endswith("``"))

        for key in (self.hasant_key, self.chandrabindu_key,
                    self.visarga_key, self.anusvara_key):
            if key not in self.diacritics:
                raise DefinitionError("DIACRITICS", key, "required diacritic is missing")
        if self.terminator_key not in self.vowels:
            raise DefinitionError("VOWELS", self.terminator_key, "terminating vowel is missing")

        self.hasant = self.diacritics[self.hasant_key]
        self.chandrabindu = self.diacritics[self.chandrabindu_key]

        self.consonant_keys = _longest_first(self.consonants)
        self.vowel_keys = _longest_first(self.vowels)
        self.special_keys = _longest_first(
            [self.reph_key, self.hasant_key, self.chandrabindu_key, self.visarga_key]
            + list(self.khanda_ta_keys) + list(self.special_rules))
        self.symbol_keys = _longest_first(self.symbols)

        logger.debug(f"Loaded {len(self.consonants)} consonants, "
                     f"{len(self.vowels)} vowels, {len(self.special_rules)} special rules")

    @classmethod
    def default(cls):
        """Return the shared instance built from the stock tables"""
        if cls._default is None:
            cls._default = cls()
        return cls._default

    @staticmethod
    def _table(data, name):
        table = {}
        for entry in data.get(name, []):
            find = entry.get("find")
            replace = entry.get("replace")
            if not isinstance(find, str) or not find:
                raise DefinitionError(name, str(find), "empty Roman key")
            if not isinstance(replace, str) or not replace:
                raise DefinitionError(name, find, "empty Bengali value")
            table[find] = replace
        return MappingProxyType(table)

    @staticmethod
    def _vowel_table(data):
        table = {}
        for entry in data.get("VOWELS", []):
            find = entry.get("find")
            independent = entry.get("replace")
            dependent = entry.get("kar")
            if not isinstance(find, str) or not find:
                raise DefinitionError("VOWELS", str(find), "empty Roman key")
            if not isinstance(independent, str) or not independent:
                raise DefinitionError("VOWELS", find, "vowel needs an independent form")
            if dependent is not None and (not isinstance(dependent, str) or not dependent):
                raise DefinitionError("VOWELS", find, "kar must be a glyph or None")
            table[find] = Vowel(independent, dependent)
        return MappingProxyType(table)

    def find_at(self, text, cur, keys):
        """Returns the longest key that occurs in text at cursor, or None

        keys must already be sorted longest-first.
        """
        for key in keys:
            if text.startswith(key, cur):
                return key
        return None

    def split_vowel_suffix(self, text):
        """Split text into (base, vowel key) at its longest vowel-key suffix

        Returns (text, None) when no vowel key ends the text or the
        vowel would leave an empty base.
        """
        for key in self.vowel_keys:
            if len(text) > len(key) and text.endswith(key):
                return text[:-len(key)], key
        return text, None

    def split_cluster(self, text):
        """Split conjunct text on the hasant marker into member keys"""
        return text.split(self.hasant_key)

    def cluster_member(self, key):
        """Bengali glyph for one conjunct member, or None if unknown"""
        if key in self.folas:
            return self.folas[key]
        return self.consonants.get(key)
