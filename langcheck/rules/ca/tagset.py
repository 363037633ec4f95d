"""Catalan tag classes used by the agreement rule.

Tags follow the EAGLES-style tagset of the Catalan dictionary: nouns
``N<type><gender><number>...``, determiners ``D<type>0<gender><number>0``,
qualifying adjectives ``AQ<degree><gender><number>...``, participles
``V<type>P00<number><gender>``, prepositions ``SPS00``. Gender ``C`` and
number ``N`` mean "common" / "invariable" and agree with both values.

Every pattern here is compiled once at import time and only read afterwards.
"""

from __future__ import annotations

from langcheck.rules.patterns import PosTagPattern, TokenPattern

# Nouns
NOUN = PosTagPattern(r"N.*")
NOUN_MS = PosTagPattern(r"N.[MC][SN].*")
NOUN_FS = PosTagPattern(r"N.[FC][SN].*")
NOUN_MP = PosTagPattern(r"N.[MC][PN].*")
NOUN_FP = PosTagPattern(r"N.[FC][PN].*")

# Determiners
DET_CS = PosTagPattern(r"D[NDA0I]0CS0")
DET_MS = PosTagPattern(r"D[NDA0I]0MS0")
DET_FS = PosTagPattern(r"D[NDA0I]0FS0")
DET_MP = PosTagPattern(r"D[NDA0I]0MP0")
DET_FP = PosTagPattern(r"D[NDA0I]0FP0")

# Noun groups: a noun or a determiner of the given gender and number
GROUP_MS = PosTagPattern(r"N.[MC][SN].*|D[NDA0I]0MS0")
GROUP_FS = PosTagPattern(r"N.[FC][SN].*|D[NDA0I]0FS0")
GROUP_MP = PosTagPattern(r"N.[MC][PN].*|D[NDA0I]0MP0")
GROUP_FP = PosTagPattern(r"N.[FC][PN].*|D[NDA0I]0FP0")
GROUP_CP = PosTagPattern(r"N.[FMC][PN].*|D[NDA0I]0[FM]P0")
GROUP_CS = PosTagPattern(r"N.[FMC][SN].*|D[NDA0I]0[FM]S0")

# Adjectives, participles and ordinals
ADJECTIVE = PosTagPattern(r"AQ.*|V.P.*|PX.*")
ADJECTIVE_MS = PosTagPattern(r"A..[MC][SN].*|V.P..SM|PX.MS.*")
ADJECTIVE_FS = PosTagPattern(r"A..[FC][SN].*|V.P..SF|PX.FS.*")
ADJECTIVE_MP = PosTagPattern(r"A..[MC][PN].*|V.P..PM|PX.MP.*")
ADJECTIVE_FP = PosTagPattern(r"A..[FC][PN].*|V.P..PF|PX.FP.*")
ADJECTIVE_CP = PosTagPattern(r"A..C[PN].*")
ADJECTIVE_CS = PosTagPattern(r"A..C[SN].*")
ADJECTIVE_M = PosTagPattern(r"A..[MC].*|V.P...M|PX.M.*")
ADJECTIVE_F = PosTagPattern(r"A..[FC].*|V.P...F|PX.F.*")
ADJECTIVE_S = PosTagPattern(r"A...[SN].*|V.P..S.|PX..S.*")
ADJECTIVE_P = PosTagPattern(r"A...[PN].*|V.P..P.|PX..P.*")

# Reading added by the disambiguator when the noun group already agrees
AGREES = PosTagPattern(r"_GN_.*")

# Categories that keep a backward scan going
KEEP_COUNT = PosTagPattern(r"A.*|N.*|D[NAID].*|SPS.*|R.*|V.P.*")
KEEP_COUNT_TOKENS = TokenPattern(r",|i|o|ni")

PREPOSITION = PosTagPattern(r"SPS.*")
AUXILIARY_VERB = PosTagPattern(r"V[AS].*")

COORDINATION = TokenPattern(r",|i|o")
COORDINATION_IONI = TokenPattern(r"i|o|ni")

# "atès que", "donat que": participles used as conjunctions
PARTICIPLE_EXCEPTIONS = TokenPattern(r"atès|atés|atesa|atesos|ateses|donat|donats|donada|donades")
# "una vegada acabat", "dos cops repetit", "el terme usat"
PREVIOUS_WORD_EXCEPTIONS = TokenPattern(r"volt(a|es)|vegad(a|es)|cops?|termes?|paraul(a|es)|mots?|vocables?")
