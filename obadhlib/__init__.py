"""Roman phonetic (Avro style) to Bengali transliteration"""
import logging

from .definitions import Definitions, Vowel
from .errors import DefinitionError, ObadhError
from .parser import ObadhParser
from .tokens import PhoneticUnit, Token, TokenKind, UnitKind

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

_parser = None


def _default_parser():
    global _parser
    if _parser is None:
        _parser = ObadhParser()
    return _parser


def transliterate(text):
    """Transliterate a line of Roman text with the stock tables"""
    return _default_parser().transliterate(text)


def tokenize_text(text):
    return _default_parser().tokenize_text(text)


def tokenize_word(word):
    return _default_parser().tokenize_word(word)


__all__ = [
    "Definitions",
    "DefinitionError",
    "ObadhError",
    "ObadhParser",
    "PhoneticUnit",
    "Token",
    "TokenKind",
    "UnitKind",
    "Vowel",
    "tokenize_text",
    "tokenize_word",
    "transliterate",
]
