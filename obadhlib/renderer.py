"""Render a phonetic unit sequence as Bengali text

The renderer walks the units once, left to right, carrying a single flag:
whether the text emitted so far ends in a bare consonant, one with no
vowel sign attached. Each unit kind has its own composition rule. A key
missing from the tables never raises; the unit's Roman text is emitted
as is and rendering carries on.
"""
import logging

from .definitions import Definitions
from .tokens import PhoneticUnit, UnitKind

logger = logging.getLogger(__name__)


def _fallback(unit, reason):
    logger.debug(f"Passing through {unit.text!r} ({unit.kind.name}): {reason}")
    return unit.text, False


def _kar(vowel_key, definitions):
    """Dependent form of a vowel; the inherent vowel draws nothing"""
    return definitions.vowels[vowel_key].dependent or ""


def _render_consonant(unit, after_consonant, d):
    glyph = d.consonants.get(unit.text)
    if glyph is None:
        return _fallback(unit, "unknown consonant")
    return glyph, True


def _render_vowel(unit, after_consonant, d):
    vowel = d.vowels.get(unit.text)
    if vowel is None:
        return _fallback(unit, "unknown vowel")
    if after_consonant:
        return vowel.dependent or "", False
    return vowel.independent, False


def _render_consonant_with_vowel(unit, after_consonant, d):
    base, vowel_key = d.split_vowel_suffix(unit.text)
    if vowel_key is None:
        return _fallback(unit, "no vowel suffix")
    glyph = d.consonants.get(base)
    if glyph is None:
        return _fallback(unit, "unknown consonant")
    return glyph + _kar(vowel_key, d), False


def _render_hasant(unit, after_consonant, d):
    # Nothing precedes it at the start of a word
    if unit.text != d.hasant_key or unit.position == 0:
        return _fallback(unit, "hasant with nothing to attach to")
    return d.hasant, False


def _render_cluster(members, d):
    """Join conjunct members with hasant; None if any member is unknown"""
    glyphs = []
    for member in members:
        glyph = d.cluster_member(member)
        if glyph is None:
            return None
        glyphs.append(glyph)
    return d.hasant.join(glyphs)


def _render_conjunct(unit, after_consonant, d):
    vowel_key = None
    base = unit.text
    if unit.kind is not UnitKind.CONJUNCT:
        base, vowel_key = d.split_vowel_suffix(unit.text)
        if vowel_key is None:
            return _fallback(unit, "no vowel suffix")
    members = d.split_cluster(base)
    if len(members) < 2:
        return _fallback(unit, "conjunct with fewer than two members")
    cluster = _render_cluster(members, d)
    if cluster is None:
        return _fallback(unit, "unknown conjunct member")
    if vowel_key is None:
        return cluster, True
    return cluster + _kar(vowel_key, d), False


def _render_reph(unit, after_consonant, d):
    if not unit.text.startswith(d.reph_key):
        return _fallback(unit, "missing reph marker")
    base = unit.text[len(d.reph_key):]
    vowel_key = None
    if unit.kind is not UnitKind.REPH_OVER_CONSONANT:
        base, vowel_key = d.split_vowel_suffix(base)
        if vowel_key is None:
            return _fallback(unit, "no vowel suffix")
    members = d.split_cluster(base)
    if len(members) == 1:
        glyph = d.consonants.get(base)
    else:
        glyph = _render_cluster(members, d)
    if glyph is None:
        return _fallback(unit, "unknown consonant under reph")
    # Reph is written before its host consonant
    if vowel_key is None:
        return d.reph_glyph + glyph, True
    return d.reph_glyph + glyph + _kar(vowel_key, d), False


def _render_special(unit, after_consonant, d):
    text = unit.text
    if text in d.special_rules:
        return d.special_rules[text], True
    if text == d.reph_key:
        return d.reph_glyph, False
    if text in d.diacritics:
        return d.diacritics[text], False
    return _fallback(unit, "unknown special form")


# Kind of the unit underneath a chandrabindu
def _chandrabindu_base_kind(unit, base, d):
    if unit.kind is UnitKind.CHANDRABINDU_WITH_CONSONANT:
        return UnitKind.CONSONANT
    if unit.kind is UnitKind.CHANDRABINDU_WITH_CONSONANT_AND_VOWEL:
        return UnitKind.CONSONANT_WITH_VOWEL
    if base == d.terminator_key:
        return UnitKind.TERMINATING_VOWEL
    return UnitKind.VOWEL


def _render_chandrabindu(unit, after_consonant, d):
    if not unit.text.endswith(d.chandrabindu_key):
        return _fallback(unit, "missing chandrabindu")
    base = unit.text[:-len(d.chandrabindu_key)]
    inner = PhoneticUnit(base, _chandrabindu_base_kind(unit, base, d), unit.position)
    text, _ = render_unit(inner, after_consonant, d)
    return text + d.chandrabindu, False


def _render_numeral(unit, after_consonant, d):
    return ''.join(d.numerals.get(char, char) for char in unit.text), False


def _render_symbol(unit, after_consonant, d):
    return d.symbols.get(unit.text, unit.text), False


def _render_unknown(unit, after_consonant, d):
    # y / w straight after a rendered consonant attach as a fola; the
    # cluster is still bare, so the flag stays set
    if after_consonant and unit.text in d.folas:
        return d.hasant + d.folas[unit.text], True
    return _fallback(unit, "no mapping")


_RENDERERS = {
    UnitKind.CONSONANT: _render_consonant,
    UnitKind.VOWEL: _render_vowel,
    UnitKind.TERMINATING_VOWEL: _render_vowel,
    UnitKind.CONSONANT_WITH_VOWEL: _render_consonant_with_vowel,
    UnitKind.CONSONANT_WITH_TERMINATOR: _render_consonant_with_vowel,
    UnitKind.CONSONANT_WITH_HASANT: _render_hasant,
    UnitKind.CONJUNCT: _render_conjunct,
    UnitKind.CONJUNCT_WITH_VOWEL: _render_conjunct,
    UnitKind.CONJUNCT_WITH_TERMINATOR: _render_conjunct,
    UnitKind.REPH_OVER_CONSONANT: _render_reph,
    UnitKind.REPH_OVER_CONSONANT_WITH_VOWEL: _render_reph,
    UnitKind.REPH_OVER_CONSONANT_WITH_TERMINATOR: _render_reph,
    UnitKind.SPECIAL_FORM: _render_special,
    UnitKind.NUMERAL: _render_numeral,
    UnitKind.SYMBOL: _render_symbol,
    UnitKind.UNKNOWN: _render_unknown,
    UnitKind.CHANDRABINDU_WITH_CONSONANT: _render_chandrabindu,
    UnitKind.CHANDRABINDU_WITH_VOWEL: _render_chandrabindu,
    UnitKind.CHANDRABINDU_WITH_CONSONANT_AND_VOWEL: _render_chandrabindu,
}


def render_unit(unit, after_consonant, definitions=None):
    """Render one unit

    Returns the Bengali text for the unit and the new value of the
    after-consonant flag.
    """
    if definitions is None:
        definitions = Definitions.default()
    return _RENDERERS[unit.kind](unit, after_consonant, definitions)


def render(units, definitions=None):
    """Render a whole unit sequence as one string"""
    if definitions is None:
        definitions = Definitions.default()
    output = []
    after_consonant = False
    for unit in units:
        text, after_consonant = render_unit(unit, after_consonant, definitions)
        output.append(text)
    return ''.join(output)
