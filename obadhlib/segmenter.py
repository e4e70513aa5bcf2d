"""Split a line of Roman text into word, whitespace, punctuation,
number and symbol tokens"""
import string

from .definitions import Definitions
from .tokens import Token, TokenKind

# Everything else in string.punctuation is a SYMBOL token
SENTENCE_PUNCTUATION = frozenset('.,;:!?"\'()[]{}-')


def _is_whitespace(char):
    return char.isspace()


def _is_digit(char):
    return char in string.digits


def _is_punctuation(char):
    return char in string.punctuation


def _match_escape(text, cur, word, definitions):
    """Returns the escape sequence at cursor that extends the current word

    Escapes only apply while a word is being built: an explicit hasant
    ``,,``, a chandrabindu or visarga suffix, and the backtick pair that
    turns a preceding T into khanda-ta.
    """
    if not word:
        return None
    if text.startswith(definitions.hasant_key, cur):
        return definitions.hasant_key
    if text[cur] in (definitions.chandrabindu_key, definitions.visarga_key):
        return text[cur]
    for key in definitions.khanda_ta_keys:
        head = key.rstrip("`")
        tail = key[len(head):]
        if word[-1] == head and text.startswith(tail, cur):
            return tail
    return None


def _run_length(text, cur, predicate):
    end = cur
    while end < len(text) and predicate(text[end]):
        end += 1
    return end - cur


def segment(text, definitions=None):
    """Tokenize a line of text

    Concatenating the contents of the returned tokens gives back the
    input unchanged.
    """
    if definitions is None:
        definitions = Definitions.default()
    tokens = []
    word = ""
    word_start = 0
    cur = 0

    while cur < len(text):
        char = text[cur]

        escape = _match_escape(text, cur, word, definitions)
        if escape is not None:
            word += escape
            cur += len(escape)
            continue

        if _is_whitespace(char):
            kind = TokenKind.WHITESPACE
            length = _run_length(text, cur, _is_whitespace)
        elif _is_digit(char):
            kind = TokenKind.NUMBER
            length = _run_length(text, cur, _is_digit)
        elif _is_punctuation(char):
            if char in SENTENCE_PUNCTUATION:
                kind = TokenKind.PUNCTUATION
            else:
                kind = TokenKind.SYMBOL
            length = 1
        else:
            if not word:
                word_start = cur
            word += char
            cur += 1
            continue

        # Any non-word token closes the word in progress
        if word:
            tokens.append(Token(word, TokenKind.WORD, word_start))
            word = ""
        tokens.append(Token(text[cur:cur + length], kind, cur))
        cur += length

    if word:
        tokens.append(Token(word, TokenKind.WORD, word_start))
    return tokens
