"""Roman to Bengali lookup tables

Every table is a list of ``find``/``replace`` records. Vowels carry an
extra ``kar`` value, the dependent form drawn after a consonant; the
inherent vowel ``o`` has none.
"""

DATA = {
    "CONSONANTS": [
        # velars
        {"find": "k", "replace": "ক"},
        {"find": "kh", "replace": "খ"},
        {"find": "g", "replace": "গ"},
        {"find": "gh", "replace": "ঘ"},
        {"find": "Ng", "replace": "ঙ"},
        # palatals
        {"find": "c", "replace": "চ"},
        {"find": "ch", "replace": "ছ"},
        {"find": "J", "replace": "জ"},
        {"find": "j", "replace": "জ"},
        {"find": "jh", "replace": "ঝ"},
        {"find": "NG", "replace": "ঞ"},
        # retroflexes
        {"find": "T", "replace": "ট"},
        {"find": "Th", "replace": "ঠ"},
        {"find": "D", "replace": "ড"},
        {"find": "Dh", "replace": "ঢ"},
        {"find": "N", "replace": "ণ"},
        # dentals
        {"find": "t", "replace": "ত"},
        {"find": "th", "replace": "থ"},
        {"find": "d", "replace": "দ"},
        {"find": "dh", "replace": "ধ"},
        {"find": "n", "replace": "ন"},
        # labials
        {"find": "p", "replace": "প"},
        {"find": "ph", "replace": "ফ"},
        {"find": "f", "replace": "ফ"},
        {"find": "b", "replace": "ব"},
        {"find": "bh", "replace": "ভ"},
        {"find": "v", "replace": "ভ"},
        {"find": "m", "replace": "ম"},
        # semivowels and liquids
        {"find": "z", "replace": "য"},
        {"find": "r", "replace": "র"},
        {"find": "l", "replace": "ল"},
        # fricatives
        {"find": "sh", "replace": "শ"},
        {"find": "S", "replace": "শ"},
        {"find": "Sh", "replace": "ষ"},
        {"find": "s", "replace": "স"},
        {"find": "h", "replace": "হ"},
        # flapped and antastha forms
        {"find": "R", "replace": "ড়"},
        {"find": "Rh", "replace": "ঢ়"},
        {"find": "y", "replace": "য়"},
        {"find": "Y", "replace": "য়"},
    ],
    "VOWELS": [
        {"find": "o", "replace": "অ", "kar": None},
        {"find": "A", "replace": "আ", "kar": "া"},
        {"find": "a", "replace": "আ", "kar": "া"},
        {"find": "i", "replace": "ই", "kar": "ি"},
        {"find": "I", "replace": "ঈ", "kar": "ী"},
        {"find": "u", "replace": "উ", "kar": "ু"},
        {"find": "U", "replace": "ঊ", "kar": "ূ"},
        {"find": "e", "replace": "এ", "kar": "ে"},
        {"find": "OI", "replace": "ঐ", "kar": "ৈ"},
        {"find": "O", "replace": "ও", "kar": "ো"},
        {"find": "OU", "replace": "ঔ", "kar": "ৌ"},
        {"find": "rri", "replace": "ঋ", "kar": "ৃ"},
    ],
    "DIACRITICS": [
        {"find": ",,", "replace": "্"},
        {"find": "^", "replace": "ঁ"},
        {"find": ":", "replace": "ঃ"},
        {"find": "T``", "replace": "ৎ"},
        {"find": "t``", "replace": "ৎ"},
        {"find": "ng", "replace": "ং"},
    ],
    # Registered conjuncts that do not follow the plain hasant join
    "SPECIAL_RULES": [
        {"find": "kkh", "replace": "ক্ষ"},
        {"find": "ksh", "replace": "ক্ষ"},
    ],
    "SYMBOLS": [
        {"find": ".", "replace": "।"},
        {"find": "$", "replace": "৳"},
    ],
    "NUMERALS": [
        {"find": "0", "replace": "০"},
        {"find": "1", "replace": "১"},
        {"find": "2", "replace": "২"},
        {"find": "3", "replace": "৩"},
        {"find": "4", "replace": "৪"},
        {"find": "5", "replace": "৫"},
        {"find": "6", "replace": "৬"},
        {"find": "7", "replace": "৭"},
        {"find": "8", "replace": "৮"},
        {"find": "9", "replace": "৯"},
    ],
    # Cluster members spelled as ya-phala / ba-phala
    "FOLAS": [
        {"find": "y", "replace": "য"},
        {"find": "w", "replace": "ব"},
    ],
    "HASANT": ",,",
    "REPH": "rr",
    "REPH_GLYPH": "র্",
    "CHANDRABINDU": "^",
    "VISARGA": ":",
    "ANUSVARA": "ng",
    "TERMINATOR": "o",
    "VOCALIC_R": "rri",
}
