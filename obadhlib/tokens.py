"""Token and phonetic unit types"""
from collections import namedtuple
from enum import Enum


class TokenKind(Enum):
    WORD = "word"
    WHITESPACE = "whitespace"
    PUNCTUATION = "punctuation"
    NUMBER = "number"
    SYMBOL = "symbol"


class UnitKind(Enum):
    CONSONANT = "consonant"
    VOWEL = "vowel"
    TERMINATING_VOWEL = "terminating_vowel"
    CONSONANT_WITH_VOWEL = "consonant_with_vowel"
    CONSONANT_WITH_TERMINATOR = "consonant_with_terminator"
    CONSONANT_WITH_HASANT = "consonant_with_hasant"
    CONJUNCT = "conjunct"
    CONJUNCT_WITH_VOWEL = "conjunct_with_vowel"
    CONJUNCT_WITH_TERMINATOR = "conjunct_with_terminator"
    REPH_OVER_CONSONANT = "reph_over_consonant"
    REPH_OVER_CONSONANT_WITH_VOWEL = "reph_over_consonant_with_vowel"
    REPH_OVER_CONSONANT_WITH_TERMINATOR = "reph_over_consonant_with_terminator"
    SPECIAL_FORM = "special_form"
    NUMERAL = "numeral"
    SYMBOL = "symbol"
    UNKNOWN = "unknown"
    CHANDRABINDU_WITH_CONSONANT = "chandrabindu_with_consonant"
    CHANDRABINDU_WITH_VOWEL = "chandrabindu_with_vowel"
    CHANDRABINDU_WITH_CONSONANT_AND_VOWEL = "chandrabindu_with_consonant_and_vowel"


# A line-level token; position is the character offset in the line
Token = namedtuple("Token", ["content", "kind", "position"])

# A Roman span inside one word; position is the offset within the word
PhoneticUnit = namedtuple("PhoneticUnit", ["text", "kind", "position"])


VOWEL_KINDS = frozenset([UnitKind.VOWEL, UnitKind.TERMINATING_VOWEL])

