import logging

from . import config
from .definitions import Definitions
from .phonetic import segment_word
from .renderer import render
from .segmenter import segment
from .tokens import TokenKind

logger = logging.getLogger(__name__)


class ObadhParser():
    def __init__(self, definitions=None, bengali_numerals=None, convert_symbols=None):
        if definitions is None:
            definitions = Definitions.default()
        if bengali_numerals is None:
            bengali_numerals = config.BENGALI_NUMERALS
        if convert_symbols is None:
            convert_symbols = config.CONVERT_SYMBOLS
        self.definitions = definitions
        self.bengali_numerals = bengali_numerals
        self.convert_symbols = convert_symbols

    @classmethod
    def parse_text(cls, text):
        parser = cls()
        return parser.transliterate(text)

    def transliterate(self, text):
        """Transliterates a line of Roman text into Bengali

        Words go through phonetic segmentation and rendering, whitespace
        is copied verbatim, punctuation and symbols are substituted from
        the symbol table and digits become Bengali numerals. Nothing is
        dropped or reordered; input the tables cannot resolve comes back
        as the original Roman text.

        Usage:

        ::
        from obadhlib import ObadhParser
        obadh = ObadhParser()
        obadh.transliterate("ami banglay gan gai")

        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        output = []
        for token in segment(text, self.definitions):
            output.append(self._render_token(token))
        return ''.join(output)

    # Avro-style spelling
    parse = transliterate

    def tokenize_text(self, text):
        """Split a line into word, whitespace, punctuation, number and
        symbol tokens"""
        return segment(text, self.definitions)

    def tokenize_word(self, word):
        """Split one word into phonetic units"""
        return segment_word(word, self.definitions)

    def analyze(self, text):
        """Break a line down token by token for debugging

        Returns one dict per token with the token text, its kind, the
        phonetic units of words as (text, kind name) pairs, and the
        rendered output.
        """
        records = []
        for token in segment(text, self.definitions):
            units = []
            if token.kind is TokenKind.WORD:
                units = [(u.text, u.kind.name) for u in segment_word(token.content, self.definitions)]
            records.append({
                "token": token.content,
                "kind": token.kind.name,
                "position": token.position,
                "units": units,
                "output": self._render_token(token),
            })
        return records

    def _render_token(self, token):
        if token.kind is TokenKind.WORD:
            return render(segment_word(token.content, self.definitions), self.definitions)
        if token.kind is TokenKind.NUMBER:
            return self._convert_number(token.content)
        if token.kind in (TokenKind.PUNCTUATION, TokenKind.SYMBOL):
            return self._convert_symbol(token.content)
        return token.content

    def _convert_number(self, text):
        """Converts ASCII digits to Bengali numerals"""
        if not self.bengali_numerals:
            return text
        return ''.join(self.definitions.numerals.get(char, char) for char in text)

    def _convert_symbol(self, text):
        """Substitutes punctuation or a symbol from the symbol table"""
        if not self.convert_symbols:
            return text
        return self.definitions.symbols.get(text, text)
