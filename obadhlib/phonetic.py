"""Split one Roman word into phonetic units

Segmentation runs in three phases:

1. longest match against the special, consonant and vowel keys, giving a
   flat list of CONSONANT / VOWEL / SPECIAL_FORM / UNKNOWN units;
2. reph resolution, where ``rr`` fuses with the unit after it;
3. cluster formation, repeated until a pass changes nothing.

Every pass reads one list and builds a new one. Units are only ever
merged, never split or reordered.
"""
import logging
import string

from .definitions import Definitions
from .tokens import PhoneticUnit, UnitKind, VOWEL_KINDS

logger = logging.getLogger(__name__)

# rr + <kind> -> reph variant
REPH_FORMS = {
    UnitKind.CONSONANT: UnitKind.REPH_OVER_CONSONANT,
    UnitKind.CONSONANT_WITH_VOWEL: UnitKind.REPH_OVER_CONSONANT_WITH_VOWEL,
    UnitKind.CONSONANT_WITH_TERMINATOR: UnitKind.REPH_OVER_CONSONANT_WITH_TERMINATOR,
}

# <kind> + ^ -> nasalized variant
CHANDRABINDU_FORMS = {
    UnitKind.CONSONANT: UnitKind.CHANDRABINDU_WITH_CONSONANT,
    UnitKind.VOWEL: UnitKind.CHANDRABINDU_WITH_VOWEL,
    UnitKind.TERMINATING_VOWEL: UnitKind.CHANDRABINDU_WITH_VOWEL,
    UnitKind.CONSONANT_WITH_VOWEL: UnitKind.CHANDRABINDU_WITH_CONSONANT_AND_VOWEL,
    UnitKind.CONSONANT_WITH_TERMINATOR: UnitKind.CHANDRABINDU_WITH_CONSONANT_AND_VOWEL,
}

CLUSTER_HEADS = frozenset([UnitKind.CONSONANT, UnitKind.CONJUNCT])

def _with_vowel(vowel_kind, with_vowel, with_terminator):
    if vowel_kind is UnitKind.TERMINATING_VOWEL:
        return with_terminator
    return with_vowel


# ---------------------------------------------------------------------------
# Phase 1: longest match
# ---------------------------------------------------------------------------

def _match_at(word, cur, definitions):
    """Matches the word at cursor position against every key set

    Returns a (found, kind) pair. Priority: anusvara ``ng``, special
    sequences, consonants, vowels, numerals, symbols; a character that
    matches nothing comes back as UNKNOWN.
    """
    d = definitions
    if word.startswith(d.anusvara_key, cur):
        return d.anusvara_key, UnitKind.SPECIAL_FORM

    found = d.find_at(word, cur, d.special_keys)
    if found is not None:
        if found == d.hasant_key:
            return found, UnitKind.CONSONANT_WITH_HASANT
        return found, UnitKind.SPECIAL_FORM

    found = d.find_at(word, cur, d.consonant_keys)
    if found is not None:
        return found, UnitKind.CONSONANT

    found = d.find_at(word, cur, d.vowel_keys)
    if found is not None:
        if found == d.terminator_key:
            return found, UnitKind.TERMINATING_VOWEL
        return found, UnitKind.VOWEL

    if word[cur] in string.digits:
        end = cur
        while end < len(word) and word[end] in string.digits:
            end += 1
        return word[cur:end], UnitKind.NUMERAL

    found = d.find_at(word, cur, d.symbol_keys)
    if found is not None:
        return found, UnitKind.SYMBOL

    return word[cur], UnitKind.UNKNOWN


def scan(word, definitions):
    """Phase 1: flat longest-match scan"""
    units = []
    cur = 0
    while cur < len(word):
        found, kind = _match_at(word, cur, definitions)
        units.append(PhoneticUnit(found, kind, cur))
        cur += len(found)
    return units


# ---------------------------------------------------------------------------
# Phase 2: reph
# ---------------------------------------------------------------------------

def resolve_reph(units, definitions):
    """Phase 2: fuse the reph marker with the unit that follows it

    ``rr`` + ``i`` is the vocalic R vowel; ``rr`` + a consonant unit
    becomes the matching REPH_OVER_CONSONANT variant.
    """
    d = definitions
    result = []
    i = 0
    while i < len(units):
        unit = units[i]
        following = units[i + 1] if i + 1 < len(units) else None
        if (unit.kind is UnitKind.SPECIAL_FORM and unit.text == d.reph_key
                and following is not None):
            text = unit.text + following.text
            if following.kind in VOWEL_KINDS and text == d.vocalic_r_key:
                result.append(PhoneticUnit(text, UnitKind.VOWEL, unit.position))
                i += 2
                continue
            if following.kind in REPH_FORMS:
                result.append(PhoneticUnit(text, REPH_FORMS[following.kind], unit.position))
                i += 2
                continue
        result.append(unit)
        i += 1
    return result


# ---------------------------------------------------------------------------
# Phase 3: clusters
# ---------------------------------------------------------------------------

def _join(left, right, kind, definitions):
    return PhoneticUnit(left.text + definitions.hasant_key + right.text,
                        kind, left.position)


def _merge_explicit_hasant(head, hasant, tail, definitions):
    """Rule a: consonant ,, consonant written out by the user"""
    if head.kind not in CLUSTER_HEADS or hasant.kind is not UnitKind.CONSONANT_WITH_HASANT:
        return None
    if tail.kind is UnitKind.CONSONANT:
        return _join(head, tail, UnitKind.CONJUNCT, definitions)
    if tail.kind is UnitKind.UNKNOWN and tail.text in definitions.folas:
        return _join(head, tail, UnitKind.CONJUNCT, definitions)
    if tail.kind is UnitKind.CONSONANT_WITH_VOWEL:
        return _join(head, tail, UnitKind.CONJUNCT_WITH_VOWEL, definitions)
    if tail.kind is UnitKind.CONSONANT_WITH_TERMINATOR:
        return _join(head, tail, UnitKind.CONJUNCT_WITH_TERMINATOR, definitions)
    return None


def _merge_pair(left, right, definitions):
    """Rules b to g on two adjacent units; None if nothing applies"""
    d = definitions

    # f: chandrabindu nasalizes whatever it follows
    if right.kind is UnitKind.SPECIAL_FORM and right.text == d.chandrabindu_key:
        if left.kind in CHANDRABINDU_FORMS:
            return PhoneticUnit(left.text + right.text,
                                CHANDRABINDU_FORMS[left.kind], left.position)
        return None

    if left.kind in CLUSTER_HEADS:
        # b: adjacent consonants cluster by default
        if right.kind is UnitKind.CONSONANT:
            return _join(left, right, UnitKind.CONJUNCT, d)
        # e: consonant before a consonant that already carries a vowel
        if right.kind is UnitKind.CONSONANT_WITH_VOWEL:
            return _join(left, right, UnitKind.CONJUNCT_WITH_VOWEL, d)
        if right.kind is UnitKind.CONSONANT_WITH_TERMINATOR:
            return _join(left, right, UnitKind.CONJUNCT_WITH_TERMINATOR, d)

    # reph over a bare consonant keeps growing into a cluster: rrkk, rrkka
    if left.kind is UnitKind.REPH_OVER_CONSONANT and right.kind in REPH_FORMS:
        return _join(left, right, REPH_FORMS[right.kind], d)

    if right.kind in VOWEL_KINDS:
        # c, d: consonant takes the vowel (vocalic R included)
        if left.kind is UnitKind.CONSONANT:
            kind = _with_vowel(right.kind, UnitKind.CONSONANT_WITH_VOWEL,
                               UnitKind.CONSONANT_WITH_TERMINATOR)
            return PhoneticUnit(left.text + right.text, kind, left.position)
        # g: conjunct and reph forms take the vowel
        if left.kind is UnitKind.CONJUNCT:
            kind = _with_vowel(right.kind, UnitKind.CONJUNCT_WITH_VOWEL,
                               UnitKind.CONJUNCT_WITH_TERMINATOR)
            return PhoneticUnit(left.text + right.text, kind, left.position)
        if left.kind is UnitKind.REPH_OVER_CONSONANT:
            kind = _with_vowel(right.kind, UnitKind.REPH_OVER_CONSONANT_WITH_VOWEL,
                               UnitKind.REPH_OVER_CONSONANT_WITH_TERMINATOR)
            return PhoneticUnit(left.text + right.text, kind, left.position)

    return None


def cluster_pass(units, definitions):
    """One phase 3 pass; returns (new units, whether anything merged)

    Each incoming unit is tried against the tail of the output first, so
    a freshly merged unit is re-examined against its next neighbour
    before the scan moves on.
    """
    result = []
    changed = False
    for unit in units:
        merged = None
        if len(result) >= 2:
            merged = _merge_explicit_hasant(result[-2], result[-1], unit, definitions)
            if merged is not None:
                del result[-2:]
        if merged is None and result:
            merged = _merge_pair(result[-1], unit, definitions)
            if merged is not None:
                result.pop()
        if merged is None:
            result.append(unit)
        else:
            result.append(merged)
            changed = True
    return result, changed


def form_clusters(units, definitions):
    """Phase 3: apply cluster passes until none fires"""
    changed = True
    while changed:
        units, changed = cluster_pass(units, definitions)
    return units


def segment_word(word, definitions=None):
    """Segment a single word into phonetic units"""
    if definitions is None:
        definitions = Definitions.default()
    units = scan(word, definitions)
    units = resolve_reph(units, definitions)
    units = form_clusters(units, definitions)
    logger.debug(f"Segmented {word!r} into {[(u.text, u.kind.name) for u in units]}")
    return units
