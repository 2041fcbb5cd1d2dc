"""Built-in English letter-to-sound rules.

WHY: The compiler needs a real table to produce the firmware blob, and
tests need one to check that dedup and layout behave on realistic data.

HOW: Rules are written the way they read in the literature:
_r(left, bracket, right, "PHONEMES"). Phonemes are space-separated
PhonemeCode names; an omitted phoneme list means the bracket is silent.
Groups are keyed by the first letter of the bracket text, punctuation
first. Within a group, more specific rules come before general ones and
the last rule is the group's catch-all.

Derived from NRL Report 7948, "Automatic Translation of English Text to
Phonetics by Means of Letter-to-Sound Rules" (Naval Research
Laboratory, 1976), via John A. Wasser's public-domain implementation,
with additional rules from Tom Jennings' t2a and later local fixes.

RULES:
- Group order and rule order are significant (first match wins)
- Context metacharacters: # one or more vowels, : zero or more
  consonants, ^ one consonant, . one voiced consonant, % suffix class
  (-e, -ed, -er, -es, -ely, -ing), + front vowel, $ word boundary
"""

from __future__ import annotations

from compact_ruleset.core.ir import ANYTHING, NOTHING, Rule, RuleTable, phonemes_from_names


def _r(left: str, bracket: str, right: str, phonemes: str = "") -> Rule:
    return Rule(left, bracket, right, phonemes_from_names(phonemes))


# 0 - punctuation
PUNCTUATION = (
    _r(ANYTHING, " ", ANYTHING, "PA4 PA3"),
    _r(ANYTHING, "-", ANYTHING, "PA4"),
    _r(".", "'s", ANYTHING, "ZZ"),
    _r("#:.e", "'s", ANYTHING, "ZZ"),
    _r("#", "'s", ANYTHING, "ZZ"),
    _r(ANYTHING, "'", ANYTHING, "PA1"),
    _r(ANYTHING, ";", ANYTHING, "PA5"),
    _r(ANYTHING, ":", ANYTHING, "PA5"),
    _r(ANYTHING, ",", ANYTHING, "PA5"),

    _r(ANYTHING, ".", "#"),
    _r(ANYTHING, ".", "^"),
    _r(ANYTHING, ".", ANYTHING, "PA5 PA5 PA4"),

    _r(ANYTHING, "?", ANYTHING, "PA5 PA5 PA4"),
    _r(ANYTHING, "!", ANYTHING, "PA5 PA5 PA4"),
)


# 1 - a
GROUP_A = (
    _r(NOTHING, "a", NOTHING, "EH EY"),
    _r(ANYTHING, "ahead", ANYTHING, "AX HH1 EH EH DD1"),
    _r(ANYTHING, "apropos", ANYTHING, "AE PP ER1 OW PP OW"),
    _r(ANYTHING, "ass", "h", "AE AE SS SS"),
    _r(ANYTHING, "allege", ANYTHING, "AX LL EH DD2 JH"),
    _r(ANYTHING, "again", ANYTHING, "AX GG3 EH EH NN1"),
    _r(NOTHING, "able", ANYTHING, "EY HH1 BB2 AX LL"),
    _r(NOTHING, "above", NOTHING, "AX BB2 AX AX VV HH1"),
    _r(NOTHING, "acro", ".", "AE HH1 KK1 ER1 OW"),
    _r(NOTHING, "are", NOTHING, "AA ER2"),
    _r(NOTHING, "ally", NOTHING, "AE AE LL AY"),
    _r(ANYTHING, "atomic", ANYTHING, "AX TT2 AA MM PA1 IH KK1"),
    _r(ANYTHING, "arch", "#v", "AX AX ER1 PA1 KK1 IH"),
    _r(ANYTHING, "arch", "#.", "AX AX ER1 CH IH"),
    _r(ANYTHING, "arch", "#^", "AX AX ER1 KK1 PA1 IH"),
    _r(ANYTHING, "argue", ANYTHING, "AA ER2 GG1 YY2 UW2"),

    _r(NOTHING, "abb", ANYTHING, "AX AX BB2"),
    _r(NOTHING, "ab", ANYTHING, "AE AE BB1 PA2"),
    _r(NOTHING, "an", "#", "AE NN1"),
    _r(NOTHING, "allo", "t", "AE LL AA"),
    _r(NOTHING, "allo", "w", "AE LL AW"),
    _r(NOTHING, "allo", ANYTHING, "AE LL OW"),
    _r(NOTHING, "ar", "o", "AX ER2"),

    _r("#:", "ally", ANYTHING, "PA1 AX LL IY"),
    _r("^", "able", ANYTHING, "PA1 EY HH1 BB2 AX LL"),
    _r(ANYTHING, "able", ANYTHING, "PA1 AX HH1 BB2 AX LL"),
    _r("^", "ance", ANYTHING, "PA1 AE NN1 SS"),
    _r(ANYTHING, "air", ANYTHING, "EY XR"),
    _r(ANYTHING, "aic", NOTHING, "EY IH KK1"),
    _r("#:", "als", NOTHING, "AX LL ZZ"),
    _r(ANYTHING, "alk", ANYTHING, "AO AO KK1"),
    _r(ANYTHING, "arr", ANYTHING, "AA ER1"),
    _r(ANYTHING, "ang", "+", "EY NN1 JH"),
    _r(NOTHING + ":", "any", ANYTHING, "EH NN1 IY"),
    _r(ANYTHING, "ary", NOTHING, "PA1 AX ER2 IY"),
    _r("^", "as", "#", "EY SS"),
    _r("#:", "al", NOTHING, "AX LL"),
    _r(ANYTHING, "al", "^", "AO LL"),
    _r(NOTHING, "al", "#", "EH EY LL"),
    _r("#:", "ag", "e", "IH JH"),

    _r(ANYTHING, "ai", ANYTHING, "EH EY"),
    _r(ANYTHING, "ay", ANYTHING, "EH EY"),
    _r(ANYTHING, "au", ANYTHING, "AO AO"),
    _r(ANYTHING, "aw", NOTHING, "AO AO"),
    _r(ANYTHING, "aw", "^", "AO AO"),
    _r(":", "ae", ANYTHING, "EH"),
    _r(ANYTHING, "a", "tion", "EY"),
    _r("c", "a", "bl", "EH EY"),
    _r("c", "a", "b#", "AE AE"),
    _r("c", "a", "pab", "EH EY"),
    _r("c", "a", "p#", "AE AE"),
    _r("c", "a", "t#^", "AE AE"),

    _r("^^^", "a", ANYTHING, "EY"),
    _r("^.", "a", "^e", "EY"),
    _r("^.", "a", "^i", "EY"),
    _r("^^", "a", ANYTHING, "AE"),
    _r("^", "a", "^##", "EY"),
    _r("^", "a", "^#", "EY"),
    _r("^", "a", "^#", "EH EY"),
    _r(ANYTHING, "a", "^%", "EY"),
    _r("#", "a", NOTHING, "AO"),
    _r(ANYTHING, "a", "wa", "AX"),
    _r(ANYTHING, "a", NOTHING, "AX"),
    _r(ANYTHING, "a", "^+#", "EY"),
    _r(ANYTHING, "a", "^+:#", "AE"),
    _r(NOTHING + ":", "a", "^+" + NOTHING, "EY"),

    _r(ANYTHING, "a", ANYTHING, "AE"),
)

# 2 - b
GROUP_B = (
    _r("b", "b", ANYTHING),
    _r(ANYTHING, "bi", "cycle", "BB2 AY"),
    _r(ANYTHING, "bi", "cycle", "BB2 AY"),
    _r(ANYTHING, "bbq", ANYTHING, "BB2 AX AX ER1 BB2 AX KK2 YY2 UW2"),
    _r(ANYTHING, "barbeque", ANYTHING, "BB2 AX AX ER1 BB2 AX KK2 YY2 UW2"),
    _r(ANYTHING, "barbaque", ANYTHING, "BB2 AX AX ER1 BB2 AX KK2 YY2 UW2"),
    _r(ANYTHING, "bargain", ANYTHING, "BB2 AO ER1 GG1 EH NN1"),
    _r(ANYTHING, "bagel", ANYTHING, "BB2 EY GG1 EH LL"),
    _r(ANYTHING, "being", ANYTHING, "BB2 IY IH NG"),
    _r(ANYTHING, "bomb", ANYTHING, "BB2 AA AA MM"),
    _r(NOTHING, "both", NOTHING, "BB2 OW TH"),
    _r(ANYTHING, "buil", ANYTHING, "BB2 IH LL"),
    _r(NOTHING, "bus", "y", "BB2 IH ZZ"),
    _r(NOTHING, "bus", "#", "BB2 IH ZZ"),
    _r(ANYTHING, "bye", ANYTHING, "BB2 AO AY"),
    _r(ANYTHING, "bear", NOTHING, "BB2 EY ER2"),
    _r(ANYTHING, "bear", "%", "BB2 EY ER2"),
    _r(ANYTHING, "bear", "s", "BB2 EY ER2"),
    _r(ANYTHING, "bear", "#", "BB2 EY ER2"),
    _r(NOTHING, "beau", ANYTHING, "BB2 OW"),

    _r(ANYTHING, "ban", "ish", "BB2 AE AE NN1"),

    _r(NOTHING, "be", "^#", "BB2 IH"),
    _r(NOTHING, "by", ANYTHING, "BB2 AO AY"),
    _r("y", "be", NOTHING, "BB2 IY"),

    _r(NOTHING, "b", "#", "BB2"),
    _r(ANYTHING, "b", NOTHING, "BB1"),
    _r(ANYTHING, "b", "#", "BB1"),
    _r(ANYTHING, "b", "l", "BB1"),
    _r(ANYTHING, "b", "r", "BB1"),

    _r(ANYTHING, "b", ANYTHING, "BB2"),
)

# 3 - c
GROUP_C = (
    _r(ANYTHING, "chinese", ANYTHING, "CH AY NN1 IY SS"),
    _r(ANYTHING, "country", ANYTHING, "KK1 AX AX NN1 TT2 ER1 IY"),
    _r(ANYTHING, "christ", NOTHING, "KK3 ER1 AY SS TT2"),
    _r(ANYTHING, "chassis", ANYTHING, "CH AX AX SS IY"),
    _r(ANYTHING, "closet", ANYTHING, "KK3 LL AO AO ZZ EH TT2"),
    _r(ANYTHING, "china", ANYTHING, "CH AY NN1 AX"),
    _r(NOTHING, "cafe", NOTHING, "KK1 AE FF AE EY"),
    _r(ANYTHING, "cele", ANYTHING, "SS EH LL PA1 EH"),
    _r(ANYTHING, "cycle", ANYTHING, "SS AY KK3 UH LL"),
    _r(ANYTHING, "chron", ANYTHING, "KK1 ER1 AO NN1"),
    _r(ANYTHING, "crea", "t", "KK3 ER1 IY EY"),
    _r(NOTHING, "cry", NOTHING, "KK3 ER1 IY"),
    _r(NOTHING, "chry", ANYTHING, "KK3 ER1 AO AY"),
    _r(NOTHING, "cry", "#", "KK3 ER1 AO AY"),
    _r(NOTHING, "caveat", ":", "KK1 AE VV IY AE TT2"),
    _r("^", "cuit", ANYTHING, "KK1 IH TT2"),
    _r(ANYTHING, "chaic", ANYTHING, "KK1 EY IH KK1"),
    _r(ANYTHING, "cation", ANYTHING, "KK1 EY SH AX NN1"),
    _r(NOTHING, "ch", "aract", "KK1"),
    _r(NOTHING, "ch", "^", "KK1"),
    _r("^e", "ch", ANYTHING, "KK1"),
    _r(ANYTHING, "ch", ANYTHING, "CH"),
    _r(NOTHING + "s", "ci", "#", "SS AY"),
    _r(ANYTHING, "ci", "a", "SH"),
    _r(ANYTHING, "ci", "o", "SH"),
    _r(ANYTHING, "ci", "en", "SH"),
    _r(ANYTHING, "c", "+", "SS"),
    _r(ANYTHING, "ck", ANYTHING, "KK2"),
    _r(ANYTHING, "com", "%", "KK1 AH MM"),
    # _r(ANYTHING, "c", "^", "KK3"),

    _r(ANYTHING, "c", "u", "KK3"),
    _r(ANYTHING, "c", "o", "KK3"),
    _r(ANYTHING, "c", "a^^", "KK3"),
    _r(ANYTHING, "c", "o^^", "KK3"),
    _r(ANYTHING, "c", "l", "KK3"),
    _r(ANYTHING, "c", "r", "KK3"),

    _r(ANYTHING, "c", "a", "KK1"),
    _r(ANYTHING, "c", "e", "KK1"),
    _r(ANYTHING, "c", "i", "KK1"),

    _r(ANYTHING, "c", NOTHING, "KK2"),
    _r(ANYTHING, "c", ANYTHING, "KK1"),
)

# 4 - d
GROUP_D = (
    _r(ANYTHING, "dead", ANYTHING, "DD2 EH EH DD1"),
    _r(NOTHING, "dogged", ANYTHING, "DD2 AO GG1 PA1 EH DD1"),
    _r("#:", "ded", NOTHING, "DD2 IH DD1"),
    _r(NOTHING, "dig", ANYTHING, "DD2 IH IH GG1"),
    _r(NOTHING, "dry", NOTHING, "DD2 ER1 AO AY"),
    _r(NOTHING, "dry", "#", "DD2 ER1 AO AY"),
    _r(NOTHING, "de", "^#", "DD2 IH"),
    _r(NOTHING, "do", NOTHING, "DD2 UW2"),
    _r(NOTHING, "does", ANYTHING, "DD2 AH ZZ"),
    _r(NOTHING, "doing", ANYTHING, "UW2 IH NG"),
    _r(NOTHING, "dow", ANYTHING, "DD2 AW"),
    _r(ANYTHING, "du", "a", "JH UW2"),
    _r(ANYTHING, "dyna", ANYTHING, "DD2 AY NN1 AX PA1"),
    _r(ANYTHING, "dyn", "#", "DD2 AY NN1 PA1"),
    _r("d", "d", ANYTHING),
    _r(ANYTHING, "d", NOTHING, "DD1"),
    _r(NOTHING, "d", ANYTHING, "DD2"),
    _r(ANYTHING, "d", ANYTHING, "DD2"),
)

# 5 - e
GROUP_E = (
    _r(NOTHING, "eye", ANYTHING, "AA AY"),
    _r(ANYTHING, "ered", NOTHING, "ER2 DD1"),
    _r(NOTHING, "ego", ANYTHING, "IY GG1 OW"),
    _r(NOTHING, "err", ANYTHING, "EH EH ER1"),
    _r("^", "err", ANYTHING, "EH EH ER1"),
    _r(ANYTHING, "ev", "er", "EH EH VV HH1"),
    _r(ANYTHING, "e", "ness"),
    # _r(ANYTHING, "e", "^%", "IY"),
    _r(ANYTHING, "eri", "#", "IY XR IY"),
    _r(ANYTHING, "eri", ANYTHING, "EH ER1 IH"),
    _r("#:", "er", "#", "ER2"),
    _r(ANYTHING, "er", "#", "EH EH ER1"),
    _r(ANYTHING, "er", ANYTHING, "ER2"),
    _r(NOTHING, "evil", ANYTHING, "IY VV EH LL"),
    _r(NOTHING, "even", ANYTHING, "IY VV EH NN1"),
    _r("m", "edia", ANYTHING, "IY DD2 IY AX"),
    _r(ANYTHING, "ecia", ANYTHING, "IY SH IY EY"),
    _r(":", "eleg", ANYTHING, "EH LL EH GG1"),

    _r("#:", "e", "w"),
    _r("t", "ew", ANYTHING, "UW2"),
    _r("s", "ew", ANYTHING, "UW2"),
    _r("r", "ew", ANYTHING, "UW2"),
    _r("d", "ew", ANYTHING, "UW2"),
    _r("l", "ew", ANYTHING, "UW2"),
    _r("z", "ew", ANYTHING, "UW2"),
    _r("n", "ew", ANYTHING, "UW2"),
    _r("j", "ew", ANYTHING, "UW2"),
    _r("th", "ew", ANYTHING, "UW2"),
    _r("ch", "ew", ANYTHING, "UW2"),
    _r("sh", "ew", ANYTHING, "UW2"),
    _r(ANYTHING, "ew", ANYTHING, "YY2 UW2"),
    _r(ANYTHING, "e", "o", "IY"),
    _r("#:s", "es", NOTHING, "IH ZZ"),
    _r("#:c", "es", NOTHING, "IH ZZ"),
    _r("#:g", "es", NOTHING, "IH ZZ"),
    _r("#:z", "es", NOTHING, "IH ZZ"),
    _r("#:x", "es", NOTHING, "IH ZZ"),
    _r("#:j", "es", NOTHING, "IH ZZ"),
    _r("#:ch", "es", NOTHING, "IH ZZ"),
    _r("#:sh", "es", NOTHING, "IH ZZ"),
    _r("#:", "e", "s" + NOTHING),
    _r("#:", "ely", NOTHING, "LL IY"),
    _r("#:", "ement", ANYTHING, "PA1 MM EH NN1 TT2"),
    _r(ANYTHING, "eful", ANYTHING, "PA1 FF UH LL"),
    _r(ANYTHING, "ee", ANYTHING, "IY"),
    _r(ANYTHING, "earn", ANYTHING, "ER2 NN1"),
    _r(NOTHING, "ear", "^", "ER2"),
    _r("k.", "ead", ANYTHING, "IY DD2"),
    _r("^.", "ead", ANYTHING, "EH DD2"),
    _r("d", "ead", ANYTHING, "EH DD2"),
    _r(ANYTHING, "ead", ANYTHING, "IY DD2"),
    _r("#:", "ea", NOTHING, "IY AX"),
    _r("#:", "ea", "s", "IY AX"),
    _r(ANYTHING, "ea", "su", "EH"),
    _r(ANYTHING, "ea", ANYTHING, "IY"),
    _r(ANYTHING, "eigh", ANYTHING, "EY"),
    _r("l", "ei", ANYTHING, "IY"),
    _r(".", "ei", ANYTHING, "EY"),
    _r(ANYTHING, "ei", "n", "AY"),
    _r(ANYTHING, "ei", ANYTHING, "IY"),
    _r(ANYTHING, "ey", ANYTHING, "IY"),
    _r(ANYTHING, "eu", ANYTHING, "YY2 UW2"),

    _r("#:", "e", "d" + NOTHING),
    _r("#s", "e", "^"),
    _r(":", "e", "x", "EH EH"),
    _r("#:", "e", NOTHING),
    _r("+:", "e", NOTHING),
    _r("':^", "e", NOTHING),
    _r(":", "equ", ANYTHING, "IY KK1 WW"),
    _r("dg", "e", ANYTHING),
    _r("dh", "e", ANYTHING, "IY"),
    _r(NOTHING + ":", "e", NOTHING, "IY"),
    _r("#", "ed", NOTHING, "DD1"),
    _r(ANYTHING, "e", ANYTHING, "EH"),
)

# 6 - f
GROUP_F = (
    _r(ANYTHING, "fnord", ANYTHING, "FF NN1 AO OR DD1"),
    _r(ANYTHING, "four", ANYTHING, "FF OW ER1"),
    _r(ANYTHING, "ful", ANYTHING, "PA1 FF UH LL"),
    _r(NOTHING, "fly", ANYTHING, "FF LL AO AY"),
    _r(".", "fly", ANYTHING, "FF LL AO AY"),
    _r(ANYTHING, "fixed", ANYTHING, "FF IH KK1 SS TT2"),
    _r(ANYTHING, "five", ANYTHING, "FF AO AY VV"),
    _r(ANYTHING, "foot", ANYTHING, "FF UH UH TT2"),
    _r(ANYTHING, "f", ANYTHING, "FF"),
)

# 7 - g
GROUP_G = (
    _r(ANYTHING, "gadget", ANYTHING, "GG2 AE AE DD1 PA2 JH EH EH TT2"),
    _r(ANYTHING, "god", ANYTHING, "GG3 AA AA DD1"),
    _r(ANYTHING, "get", ANYTHING, "GG3 EH EH TT2"),
    _r(ANYTHING, "gen", "^", "JH EH EH NN1"),
    _r(ANYTHING, "gen", "#^", "JH EH EH NN1"),
    _r(ANYTHING, "gen", NOTHING, "JH EH EH NN1"),
    _r(ANYTHING, "giv", ANYTHING, "GG2 IH IH VV HH1"),
    _r("su", "gges", ANYTHING, "GG1 JH EH SS"),
    _r(ANYTHING, "great", ANYTHING, "GG2 ER1 EY TT2"),
    _r(ANYTHING, "good", ANYTHING, "GG2 UH UH DD1"),
    # hmmm guest guess
    _r(NOTHING, "gue", ANYTHING, "GG2 EH"),
    # hmm don't know about this one.  argue? vague?
    _r(ANYTHING, "gue", ANYTHING, "GG3"),

    _r("d", "g", ANYTHING, "JH"),
    _r("##", "g", ANYTHING, "GG1"),
    _r(ANYTHING, "g", "+", "JH"),
    _r(ANYTHING, "gg", ANYTHING, "GG3 PA1"),

    _r("campai", "g", "n"),
    _r("arrai", "g", "n"),
    _r("ali", "g", "n"),
    _r("beni", "g", "n"),
    _r("arrai", "g", "n"),

    _r(ANYTHING, "g", "a", "GG1"),
    _r(ANYTHING, "g", "e", "GG1"),
    _r(ANYTHING, "g", "i", "GG1"),
    _r(ANYTHING, "g", "y", "GG1"),

    _r(ANYTHING, "g", "o", "GG2"),
    _r(ANYTHING, "g", "u", "GG2"),
    _r(ANYTHING, "g", "l", "GG2"),
    _r(ANYTHING, "g", "r", "GG2"),


    _r(ANYTHING, "g", NOTHING, "GG3"),
    _r("n", "g", ANYTHING, "GG3"),
    _r(ANYTHING, "g", ANYTHING, "GG3"),
)

# 8 - h
GROUP_H = (
    _r(ANYTHING, "honor", ANYTHING, "AO NN1 ER2"),
    _r(ANYTHING, "heard", ANYTHING, "HH1 ER2 DD1"),
    _r(ANYTHING, "height", ANYTHING, "HH1 AY TT2"),
    _r(ANYTHING, "honest", ANYTHING, "AO NN1 EH SS TT2"),
    _r(ANYTHING, "hood", ANYTHING, "HH1 UH UH DD1"),
    _r("ab", "hor", ANYTHING, "OW ER2"),
    _r(ANYTHING, "heavy", ANYTHING, "HH1 AE VV IY"),
    _r(ANYTHING, "heart", ANYTHING, "HH1 AA ER1 TT2"),
    _r(ANYTHING, "half", ANYTHING, "HH1 AE AE FF"),
    _r(ANYTHING, "hive", ANYTHING, "HH1 AA AY VV"),
    _r(ANYTHING, "heavi", ":#", "HH1 AE VV IY"),
    _r(NOTHING, "hav", ANYTHING, "HH1 AE VV HH1"),
    _r(ANYTHING, "ha", NOTHING, "HH1 AA AA"),
    _r(NOTHING, "hi", NOTHING, "HH1 AA AY"),
    _r(ANYTHING, "he", "t", "HH1 AE"),
    _r(ANYTHING, "he", "x", "HH1 AE"),
    _r(ANYTHING, "hy", ANYTHING, "HH1 AA AY"),
    _r(NOTHING, "hang", ANYTHING, "HH1 AE NG"),
    _r(NOTHING, "here", ANYTHING, "HH1 IY XR"),
    _r(NOTHING, "hour", ANYTHING, "AW ER2"),
    _r(ANYTHING, "how", ANYTHING, "HH1 AW"),
    _r(ANYTHING, "h", "onor"),
    _r(ANYTHING, "h", "onest"),
    _r(ANYTHING, "h", "#", "HH1"),
    _r(ANYTHING, "h", ANYTHING),
)

# 9 - i
GROUP_I = (
    _r(NOTHING, "i", NOTHING, "AO AY"),
    _r(NOTHING, "ii", NOTHING, "TT2 UW2"),
    _r(NOTHING, "iii", NOTHING, "TH ER1 IY"),

    _r(NOTHING, "intrigu", "#", "IH NN1 TT2 ER1 IY GG1"),
    _r(NOTHING, "iso", ANYTHING, "AY SS OW"),
    _r(ANYTHING, "ity", NOTHING, "PA1 IH TT2 IY"),
    _r(NOTHING, "in", ANYTHING, "IH IH NN1"),
    _r(NOTHING, "i", "o", "AY"),
    _r(ANYTHING, "ify", ANYTHING, "PA1 IH FF AY"),
    _r(ANYTHING, "igh", ANYTHING, "AY"),
    _r(ANYTHING, "ild", ANYTHING, "AY LL DD1"),
    _r(ANYTHING, "ign", NOTHING, "AY NN1"),
    _r(ANYTHING, "in", "d", "AY NN1"),
    _r(ANYTHING, "ier", ANYTHING, "IY ER2"),
    _r(ANYTHING, "idea", ANYTHING, "AY DD2 IY AX"),
    _r(NOTHING, "idl", ANYTHING, "AY DD2 AX LL"),  # there was previously a 'YYY' at the end
    _r(ANYTHING, "iron", ANYTHING, "AA AY ER2 NN1"),
    _r(ANYTHING, "ible", ANYTHING, "IH BB1 LL"),
    _r("r", "iend", ANYTHING, "AE NN1 DD1"),
    _r(ANYTHING, "iend", ANYTHING, "IY NN1 DD1"),
    _r("#:r", "ied", ANYTHING, "IY DD1"),
    _r(ANYTHING, "ied", NOTHING, "AY DD1"),
    _r(ANYTHING, "ien", ANYTHING, "IY EH NN1"),
    _r(ANYTHING, "ion", ANYTHING, "YY2 AX NN1"),
    _r("ch", "ine", ANYTHING, "IY NN1"),
    _r("ent", "ice", ANYTHING, "AY SS"),
    _r(ANYTHING, "ice", ANYTHING, "IH SS"),
    _r(ANYTHING, "iec", "%", "IY SS SS"),
    _r("#.", "ies", NOTHING, "IY ZZ"),
    _r(ANYTHING, "ies", NOTHING, "AY ZZ"),
    _r(ANYTHING, "ie", "t", "AY EH"),
    _r(ANYTHING, "ie", "^", "IY"),
    _r(ANYTHING, "i", "cation", "IH"),

    _r(ANYTHING, "ing", ANYTHING, "IH NG"),
    _r(ANYTHING, "ign", "^", "AA AY NN1"),
    _r(ANYTHING, "ign", "%", "AA AY NN1"),
    _r(ANYTHING, "ique", ANYTHING, "IY KK1"),
    _r(ANYTHING, "ish", ANYTHING, "IH SH"),


    _r(NOTHING, "ir", ANYTHING, "YR"),
    _r(ANYTHING, "ir", "#", "AA AY ER1"),
    _r(ANYTHING, "ir", ANYTHING, "ER2"),
    _r(ANYTHING, "iz", "%", "AA AY ZZ"),
    _r(ANYTHING, "is", "%", "AA AY ZZ"),

    _r("^ch", "i", ".", "AA AY"),
    _r("^ch", "i", "^", "IH"),
    _r(NOTHING + "#^", "i", "^", "IH"),
    _r("^#^", "i", "^", "IH"),
    _r("^#^", "i", "#", "IY"),
    _r(".", "i", NOTHING, "AO AY"),
    _r("#^", "i", "^#", "AY"),
    _r(ANYTHING, "i", "gue", "IY"),
    _r(".", "i", "ve", "AA AY"),
    _r(ANYTHING, "i", "ve", "IH"),
    _r(ANYTHING, "i", "^+:#", "IH"),
    _r(".", "i", "o", "AO AY"),
    _r("#^", "i", "^" + NOTHING, "IH"),
    _r("#^", "i", "^#^", "IH"),
    _r("#^", "i", "^", "IY"),
    _r("^", "i", "^#", "AY"),
    _r("^", "i", "o", "IY"),
    _r(".", "i", "a", "AY"),
    _r(ANYTHING, "i", "a", "IY"),
    _r(NOTHING + ":", "i", "%", "AY"),
    _r(ANYTHING, "i", "%", "IY"),
    _r(".", "i", ".#", "AA AY"),  # there was previously an 'XX' at the end
    _r(ANYTHING, "i", "d%", "AH AY"),
    _r("+^", "i", "^+", "AH AY"),
    _r(ANYTHING, "i", "t%", "AH AY"),
    _r("#:^", "i", "^+", "AH AY"),
    _r(ANYTHING, "i", "^+", "AH AY"),
    _r(".", "i", ".", "IH IH"),
    _r(ANYTHING, "i", "nus", "AA AY"),
    _r(ANYTHING, "i", ANYTHING, "IH"),
)

# 10 - j
GROUP_J = (
    _r(ANYTHING, "japanese", ANYTHING, "JH AX PP AE AE NN1 IY SS SS"),
    _r(ANYTHING, "japan", ANYTHING, "JH AX PP AE AE NN1"),
    _r(ANYTHING, "july", ANYTHING, "JH UW2 LL AE AY"),
    _r(ANYTHING, "jesus", ANYTHING, "JH IY ZZ AX SS"),
    _r(ANYTHING, "j", ANYTHING, "JH"),
)

# 11 - k
GROUP_K = (
    _r(NOTHING, "k", "n"),

    _r(ANYTHING, "k", "u", "KK3"),
    _r(ANYTHING, "k", "o", "KK3"),
    _r(ANYTHING, "k", "a^^", "KK3"),
    _r(ANYTHING, "k", "o^^", "KK3"),
    _r(ANYTHING, "k", "l", "KK3"),
    _r(ANYTHING, "k", "r", "KK3"),

    _r(ANYTHING, "k", "a", "KK1"),
    _r(ANYTHING, "k", "e", "KK1"),
    _r(ANYTHING, "k", "i", "KK1"),

    _r(ANYTHING, "k", NOTHING, "KK2"),
    _r(ANYTHING, "k", ANYTHING, "KK1"),
)

# 12 - l
GROUP_L = (
    _r("l", "l", ANYTHING),
    _r(NOTHING, "lion", ANYTHING, "LL AY AX NN1"),
    _r(ANYTHING, "lead", ANYTHING, "LL IY DD1"),
    _r(ANYTHING, "level", ANYTHING, "LL EH VV AX LL"),
    _r(ANYTHING, "liber", ANYTHING, "LL IH BB2 ER2"),
    _r(NOTHING, "lose", ANYTHING, "LL UW2 ZZ"),
    _r(NOTHING, "liv", ANYTHING, "LL IH VV"),
    _r("^", "liv", ANYTHING, "LL AY VV"),
    _r("#", "liv", ANYTHING, "LL IH VV"),
    _r(ANYTHING, "liv", ANYTHING, "LL AY VV"),
    _r(ANYTHING, "lo", "c#", "LL OW"),
    _r("#:^", "l", "%", "LL"),

    _r(ANYTHING, "ly", NOTHING, "PA1 LL IY"),
    _r(ANYTHING, "l", ANYTHING, "LL"),
)

# 13 - m
GROUP_M = (
    _r("m", "m", ANYTHING),
    _r(NOTHING, "my", NOTHING, "MM AY"),
    _r(NOTHING, "mary", NOTHING, "MM EY XR IY"),
    _r("#", "mary", NOTHING, "PA1 MM EY XR IY"),
    _r(ANYTHING, "micro", ANYTHING, "MM AY KK1 ER1 OW"),
    _r(ANYTHING, "mono", ".", "MM AA NN1 OW"),
    _r(ANYTHING, "mono", "^", "MM AA NN1 AA"),
    _r(ANYTHING, "mon", "#", "MM AA AA NN1"),
    _r(ANYTHING, "mos", ANYTHING, "MM OW SS"),
    _r(ANYTHING, "mov", ANYTHING, "MM UW2 VV HH1"),
    _r("th", "m", "#", "MM"),
    _r("th", "m", NOTHING, "IH MM"),
    _r(ANYTHING, "m", ANYTHING, "MM"),
)

# 14 - n
GROUP_N = (
    _r("n", "n", ANYTHING),
    _r(NOTHING, "now", NOTHING, "NN1 AW"),
    _r("#", "ng", "+", "NN1 JH"),
    _r(ANYTHING, "ng", "r", "NG GG1"),
    _r(ANYTHING, "ng", "#", "NG GG1"),
    _r(ANYTHING, "ngl", "%", "NG GG1 AX LL"),
    _r(ANYTHING, "ng", ANYTHING, "NG"),
    _r(ANYTHING, "nk", ANYTHING, "NG KK1"),
    _r(NOTHING, "none", ANYTHING, "NN2 AH NN1"),
    _r(NOTHING, "non", ":", "NN2 AA AA NN1"),
    _r(ANYTHING, "nuc", "l", "NN2 UW1 KK1"),

    _r("r", "n", ANYTHING, "NN1"),
    _r(ANYTHING, "n", "#r", "NN1"),
    _r(ANYTHING, "n", "o", "NN2"),

    _r(ANYTHING, "n", ANYTHING, "NN1"),
)

# 15 - o
GROUP_O = (
    _r(NOTHING, "only", ANYTHING, "OW NN1 LL IY"),
    _r(NOTHING, "once", ANYTHING, "WW AH NN1 SS"),
    _r(NOTHING, "oh", NOTHING, "OW"),
    _r(NOTHING, "ok", NOTHING, "OW PA3 KK1 EH EY"),
    _r(NOTHING, "okay", NOTHING, "OW PA3 KK1 EH EY"),
    _r(NOTHING, "ohio", NOTHING, "OW HH1 AY OW"),
    _r(NOTHING, "over", ANYTHING, "OW VV ER2"),
    _r(ANYTHING, "other", ANYTHING, "AH DH2 ER2"),
    _r(ANYTHING, "ohm", NOTHING, "OW MM"),

    _r(ANYTHING, "origin", ANYTHING, "OR IH DD2 JH IH NN1"),
    _r(ANYTHING, "orough", ANYTHING, "ER2 OW"),
    _r(ANYTHING, "ought", ANYTHING, "AO TT2"),
    _r(ANYTHING, "occu", "p", "AA KK1 PA1 UW1"),
    _r(ANYTHING, "ough", ANYTHING, "AH FF"),
    _r(ANYTHING, "ore", ANYTHING, "OW ER1"),
    _r("#:", "ors", NOTHING, "ER2 ZZ"),
    _r(ANYTHING, "orr", ANYTHING, "AO ER1"),
    _r("d", "one", ANYTHING, "AH NN1"),
    _r("^y", "one", ANYTHING, "WW AH NN1"),
    _r(NOTHING, "one", ANYTHING, "WW AH NN1"),
    _r(ANYTHING, "our", NOTHING, "AW ER1"),
    _r(ANYTHING, "our", "^", "OR"),
    _r(ANYTHING, "our", ANYTHING, "AO AW ER1"),
    _r("t", "own", ANYTHING, "AW NN1"),
    _r("br", "own", ANYTHING, "AW NN1"),
    _r("fr", "own", ANYTHING, "AW NN1"),
    _r(ANYTHING, "olo", ANYTHING, "AO AA LL AO"),
    _r(ANYTHING, "ould", ANYTHING, "UH DD1"),
    _r(ANYTHING, "oup", ANYTHING, "UW2 PP"),
    _r(ANYTHING, "oing", ANYTHING, "OW IH NG"),
    _r(ANYTHING, "omb", "%", "OW MM"),
    _r(ANYTHING, "oor", ANYTHING, "AO ER1"),
    _r(ANYTHING, "ook", ANYTHING, "UH KK1"),
    _r(ANYTHING, "on't", ANYTHING, "OW NN1 TT2"),
    _r(ANYTHING, "oss", NOTHING, "AO SS"),

    _r(ANYTHING, "of", NOTHING, "AX AX VV HH1"),
    _r("^", "or", NOTHING, "AO AO ER1"),
    _r("#:", "or", NOTHING, "ER2"),
    _r(ANYTHING, "or", ANYTHING, "AO AO ER1"),
    _r(ANYTHING, "ow", NOTHING, "OW"),
    _r(ANYTHING, "ow", "#", "OW"),
    _r(ANYTHING, "ow", ".", "OW"),
    _r(ANYTHING, "ow", ANYTHING, "AW"),
    _r(NOTHING + "l", "ov", ANYTHING, "AH VV HH1"),
    _r(NOTHING + "d", "ov", ANYTHING, "AH VV HH1"),
    _r("gl", "ov", ANYTHING, "AH VV HH1"),
    _r("^", "ov", ANYTHING, "OW VV HH1"),
    _r(ANYTHING, "ov", ANYTHING, "AH VV HH1"),
    _r(ANYTHING, "ol", "d", "OW LL"),
    _r(NOTHING, "ou", ANYTHING, "AW"),
    _r("h", "ou", "s#", "AW"),
    _r("ac", "ou", "s", "UW2"),
    _r("^", "ou", "^l", "AH"),
    _r(ANYTHING, "ou", ANYTHING, "AW"),
    _r(ANYTHING, "oa", ANYTHING, "OW"),
    _r(ANYTHING, "oy", ANYTHING, "OY"),
    _r(ANYTHING, "oi", ANYTHING, "OY"),
    _r("i", "on", ANYTHING, "AX AX NN1"),
    _r("#:", "on", NOTHING, "AX AX NN1"),
    _r("#^", "on", ANYTHING, "AX AX NN1"),
    _r(ANYTHING, "of", "^", "AO FF"),
    _r("#:^", "om", ANYTHING, "AH MM"),
    _r(ANYTHING, "oo", ANYTHING, "UW2"),

    _r(ANYTHING, "ous", ANYTHING, "AX SS"),

    _r("^#^", "o", "^", "AX"),
    _r("^#^", "o", "#", "OW"),
    _r("#", "o", ".", "OW"),
    _r("^", "o", "^#^", "AX AX"),
    _r("^", "o", "^#", "OW"),
    _r(ANYTHING, "o", "^%", "OW"),
    _r(ANYTHING, "o", "^en", "OW"),
    _r(ANYTHING, "o", "^i#", "OW"),
    _r(ANYTHING, "o", "e", "OW"),
    _r(ANYTHING, "o", NOTHING, "OW"),
    _r("c", "o", "n", "AA"),
    _r(ANYTHING, "o", "ng", "AO"),
    _r(NOTHING + ":^", "o", "n", "AX"),
    _r(ANYTHING, "o", "st" + NOTHING, "OW"),
    _r(ANYTHING, "o", ANYTHING, "AO"),
)

# 16 - p
GROUP_P = (
    _r(NOTHING, "pi", NOTHING, "PP AY"),
    _r(ANYTHING, "put", NOTHING, "PP UH TT2"),
    _r(ANYTHING, "prove", ANYTHING, "PP ER1 UW2 VV"),
    _r(ANYTHING, "ply", ANYTHING, "PP LL AY"),
    _r("p", "p", ANYTHING),
    _r(ANYTHING, "phe", NOTHING, "FF IY"),
    _r(ANYTHING, "phe", "s" + NOTHING, "FF IY"),
    _r(ANYTHING, "peop", ANYTHING, "PP IY PP"),
    _r(ANYTHING, "pow", ANYTHING, "PP AW"),
    _r(ANYTHING, "ph", ANYTHING, "FF"),
    _r(ANYTHING, "p", ANYTHING, "PP"),
)

# 17 - q
GROUP_Q = (
    _r(ANYTHING, "quar", ANYTHING, "KK3 WW AO ER1"),
    _r(ANYTHING, "que", NOTHING, "KK2"),
    _r(ANYTHING, "que", "s", "KK2"),
    _r(ANYTHING, "qu", ANYTHING, "KK3 WW"),
    _r(ANYTHING, "q", ANYTHING, "KK1"),
)

# 18 - r
GROUP_R = (
    _r(NOTHING, "rugged", ANYTHING, "ER1 AX GG1 PA1 EH DD1"),
    _r(NOTHING, "russia", ANYTHING, "ER1 AX SH PA1 AX"),
    _r(NOTHING, "reality", ANYTHING, "ER1 IY AE LL IH TT2 IY"),
    _r(ANYTHING, "radio", ANYTHING, "ER1 EY DD2 IY OW"),
    _r(ANYTHING, "radic", ANYTHING, "ER1 AE DD2 IH KK1"),
    _r(NOTHING, "re", "^#", "ER1 IY"),
    _r(NOTHING, "re", "^^#", "ER1 IY"),
    _r(NOTHING, "re", "^^+", "ER1 IY"),

    _r("^", "r", ANYTHING, "RR2"),
    _r(ANYTHING, "r", ANYTHING, "ER1"),
)

# 19 - s
GROUP_S = (
    _r(ANYTHING, "said", ANYTHING, "SS EH DD1"),
    _r(ANYTHING, "secret", ANYTHING, "SS IY KK1 ER1 EH TT2"),
    _r(NOTHING, "sly", ANYTHING, "SS LL AY"),
    _r(NOTHING, "satur", ANYTHING, "SS AE AE TT2 ER2"),
    _r(ANYTHING, "some", ANYTHING, "SS AH MM"),
    _r(ANYTHING, "s", "hon#^", "SS"),
    _r(ANYTHING, "sh", ANYTHING, "SH"),
    _r("#", "sur", "#", "ZH ER2"),
    _r(ANYTHING, "sur", "#", "SH ER2"),
    _r("#", "su", "#", "ZH UW2"),
    _r("#", "ssu", "#", "SH UW2"),
    _r("#", "sed", NOTHING, "ZZ DD1"),
    _r("#", "sion", ANYTHING, "PA1 ZH AX NN1"),
    _r("^", "sion", ANYTHING, "PA1 SH AX NN1"),
    _r("s", "sian", ANYTHING, "SS SS IY AX NN1"),
    _r("#", "sian", ANYTHING, "PA1 ZH IY AX NN1"),
    _r(ANYTHING, "sian", ANYTHING, "PA1 ZH AX NN1"),
    _r(NOTHING, "sch", ANYTHING, "SS KK1"),
    _r("#", "sm", ANYTHING, "ZZ MM"),
    _r("#", "sn", "'", "ZZ AX NN1"),
    _r(NOTHING, "sky", ANYTHING, "SS KK1 AY"),
    _r("#", "s", "#", "ZZ"),
    _r(".", "s", NOTHING, "ZZ"),
    _r("#:.e", "s", NOTHING, "ZZ"),
    _r("#:^##", "s", NOTHING, "ZZ"),
    _r("#:^#", "s", NOTHING, "SS"),
    _r("u", "s", NOTHING, "SS"),
    _r(NOTHING + ":#", "s", NOTHING, "ZZ"),
    _r(ANYTHING, "s", "s"),
    _r(ANYTHING, "s", "c+"),
    _r(ANYTHING, "s", ANYTHING, "SS"),
)

# 20 - t
GROUP_T = (
    _r(NOTHING, "the", NOTHING, "DH1 IY"),
    _r(NOTHING, "this", NOTHING, "DH2 IH IH SS SS"),
    _r(NOTHING, "than", NOTHING, "DH2 AE AE NN1"),
    _r(NOTHING, "them", NOTHING, "DH2 EH EH MM"),
    _r(NOTHING, "tilde", NOTHING, "TT2 IH LL DD2 AX"),
    _r(NOTHING, "tuesday", NOTHING, "TT2 UW2 ZZ PA2 DD2 EY"),

    _r(NOTHING, "try", ANYTHING, "TT2 ER1 AY"),
    _r(NOTHING, "thy", ANYTHING, "DH2 AY"),
    _r(NOTHING, "they", ANYTHING, "DH2 EH EY"),
    _r(NOTHING, "there", ANYTHING, "DH2 EH XR"),
    _r(NOTHING, "then", ANYTHING, "DH2 EH EH NN1"),
    _r(NOTHING, "thus", ANYTHING, "DH2 AH AH SS"),
    _r(ANYTHING, "that", NOTHING, "DH2 AE TT2"),

    _r(ANYTHING, "truly", ANYTHING, "TT2 ER1 UW2 LL IY"),
    _r(ANYTHING, "truth", ANYTHING, "TT2 ER1 UW2 TH"),
    _r(ANYTHING, "their", ANYTHING, "DH2 EH IY XR"),
    _r(ANYTHING, "these", NOTHING, "DH2 IY ZZ"),
    _r(ANYTHING, "through", ANYTHING, "TH ER1 UW2"),
    _r(ANYTHING, "those", ANYTHING, "DH2 OW ZZ"),
    _r(ANYTHING, "though", NOTHING, "DH2 OW"),

    _r(ANYTHING, "tion", ANYTHING, "PA1 SH AX NN1"),
    _r(ANYTHING, "tian", ANYTHING, "PA1 SH AX NN1"),
    _r(ANYTHING, "tien", ANYTHING, "SH AX NN1"),

    _r(ANYTHING, "tear", NOTHING, "TT2 EY ER2"),
    _r(ANYTHING, "tear", "%", "TT2 EY ER2"),
    _r(ANYTHING, "tear", "#", "TT2 EY ER2"),

    _r("#", "t", "ia", "SH"),
    _r(".", "t", "ia", "SH"),

    _r(ANYTHING, "ther", ANYTHING, "DH2 PA2 ER2"),
    _r(ANYTHING, "to", NOTHING, "TT2 UW2"),
    _r("#", "th", ANYTHING, "TH"),
    _r(ANYTHING, "th", ANYTHING, "TH"),
    _r("#:", "ted", NOTHING, "PA1 TT2 IH DD1"),
    _r(ANYTHING, "tur", "#", "PA1 CH ER2"),
    _r(ANYTHING, "tur", "^", "TT2 ER2"),
    _r(ANYTHING, "tu", "a", "CH UW2"),
    _r(NOTHING, "two", ANYTHING, "TT2 UW2"),

    _r("t", "t", ANYTHING),

    _r(ANYTHING, "t", "s", "TT1"),
    _r(ANYTHING, "t", ANYTHING, "TT2"),
)

# 21 - u
GROUP_U = (
    _r(NOTHING, "un", NOTHING, "YY2 UW2 PA3 AE NN1"),
    _r(NOTHING, "usa", NOTHING, "YY2 UW2 PA3 AE SS SS PA3 EH EY"),
    _r(NOTHING, "ussr", NOTHING, "YY2 UW2 PA3 AE SS SS PA3 AE SS SS PA3 AA AR"),

    _r(NOTHING, "u", NOTHING, "YY2 UW1"),
    _r(NOTHING, "un", "i", "YY2 UW2 NN1"),
    _r(NOTHING, "un", ":", "AH NN1 PA1"),
    _r(NOTHING, "un", ANYTHING, "AH NN1"),
    _r(NOTHING, "upon", ANYTHING, "AX PP AO NN1"),
    _r("d", "up", ANYTHING, "UW2 PP"),
    # _r(ANYTHING, "use", ".", "UW1 ZZ"),
    _r("t", "ur", "#", "UH ER1"),
    _r("s", "ur", "#", "UH ER1"),
    _r("r", "ur", "#", "UH ER1"),
    _r("d", "ur", "#", "UH ER1"),
    _r("l", "ur", "#", "UH ER1"),
    _r("z", "ur", "#", "UH ER1"),
    _r("n", "ur", "#", "UH ER1"),
    _r("j", "ur", "#", "UH ER1"),
    _r("th", "ur", "#", "UH ER1"),
    _r("ch", "ur", "#", "UH ER1"),
    _r("sh", "ur", "#", "UH ER1"),
    _r("arg", "u", "#", "YY2 UW2"),
    _r(ANYTHING, "ur", "#", "YY2 UH ER1"),
    _r(ANYTHING, "ur", ANYTHING, "ER2"),
    _r(ANYTHING, "uy", ANYTHING, "AA AY"),

    _r(ANYTHING, "u", "^#^", "YY2 UW2"),
    _r(ANYTHING, "u", "^" + NOTHING, "AH"),
    _r(ANYTHING, "u", "%", "UW2"),
    _r(NOTHING + "g", "u", "#"),
    _r("g", "u", "%"),
    _r("g", "u", "#", "WW"),
    _r("#n", "u", ANYTHING, "YY2 UW2"),
    _r("#m", "u", ANYTHING, "YY2 UW2"),
    _r("f", "u", "^^", "UH"),
    _r("b", "u", "^^", "UH"),
    _r("^", "u", "^e", "YY2 UW2"),
    _r("^", "u", "^", "AX"),
    _r(ANYTHING, "u", "^^", "AH"),
    _r("t", "u", ANYTHING, "UW2"),
    _r("s", "u", ANYTHING, "UW2"),
    _r("r", "u", ANYTHING, "UW2"),
    _r("d", "u", ANYTHING, "UW2"),
    _r("l", "u", ANYTHING, "UW2"),
    _r("z", "u", ANYTHING, "UW2"),
    _r("n", "u", ANYTHING, "UW2"),
    _r("j", "u", ANYTHING, "UW2"),
    _r("th", "u", ANYTHING, "UW2"),
    _r("ch", "u", ANYTHING, "UW2"),
    _r("sh", "u", ANYTHING, "UW2"),
    _r(ANYTHING, "u", ANYTHING, "YY2 UW2"),
)

# 22 - v
GROUP_V = (
    _r(ANYTHING, "view", ANYTHING, "VV YY2 UW2"),
    _r(NOTHING, "very", NOTHING, "VV EH ER2 PA1 IY"),
    _r(ANYTHING, "vary", ANYTHING, "VV EY PA1 ER1 IY"),
    _r(ANYTHING, "v", ANYTHING, "VV"),
)

# 23 - w
GROUP_W = (
    _r(NOTHING, "were", ANYTHING, "WW ER2"),
    _r(ANYTHING, "weigh", ANYTHING, "WW EH EY"),
    _r(ANYTHING, "wood", ANYTHING, "WW UH UH DD1"),
    _r(ANYTHING, "wary", ANYTHING, "WW EH ER2 PA1 IY"),
    _r(ANYTHING, "where", ANYTHING, "WW EH ER1"),
    _r(ANYTHING, "what", ANYTHING, "WW AA AA TT2"),
    _r(ANYTHING, "want", ANYTHING, "WW AA AA NN1 TT2"),
    _r(ANYTHING, "whol", ANYTHING, "HH1 OW LL"),
    _r(ANYTHING, "who", ANYTHING, "HH1 UW2"),
    _r(ANYTHING, "why", ANYTHING, "WW AO AY"),
    _r(ANYTHING, "wear", ANYTHING, "WW EY ER2"),
    _r(ANYTHING, "wea", "th", "WW EH"),
    _r(ANYTHING, "wea", "l", "WW EH"),
    _r(ANYTHING, "wea", "p", "WW EH"),
    _r(ANYTHING, "wa", "s", "WW AA"),
    _r(ANYTHING, "wa", "t", "WW AA"),
    _r(ANYTHING, "wh", ANYTHING, "WH"),
    _r(ANYTHING, "war", NOTHING, "WW AO ER1"),
    _r(NOTHING, "wicked", ANYTHING, "WW IH KK2 PA1 EH DD1"),
    _r("be", "wilder", ANYTHING, "WW IH LL DD2 ER2"),
    _r(NOTHING, "wilder", "ness", "WW IH LL DD2 ER2"),
    _r(NOTHING, "wild", "erness", "WW IH LL DD2"),
    _r(NOTHING, "wily", NOTHING, "WW AY LL IY"),
    _r(ANYTHING, "wor", "^", "WW ER2"),
    _r(ANYTHING, "wr", ANYTHING, "ER1"),

    _r(ANYTHING, "w", ANYTHING, "WW"),
)

# 24 - x
GROUP_X = (
    _r(ANYTHING, "x", ANYTHING, "KK1 SS"),
)

# 25 - y
GROUP_Y = (
    _r(ANYTHING, "young", ANYTHING, "YY2 AH NG"),
    _r(NOTHING, "your", ANYTHING, "YY2 UH ER2"),
    _r(NOTHING, "you", ANYTHING, "YY2 UW2"),
    _r(NOTHING, "yes", ANYTHING, "YY2 EH SS"),
    _r(ANYTHING, "yte", ANYTHING, "AY TT2 PA1"),

    _r(ANYTHING, "y", NOTHING, "IY"),
    _r(ANYTHING, "y", ANYTHING, "IH"),
    # _r(NOTHING, "y", ANYTHING, "YY2"),
    # _r("ph", "y", ANYTHING, "IH"),
    # _r(":s", "y", ".", "IH"),
    # _r("#^", "y", ".", "AY"),
    # _r("h", "y", "^", "AY"),
    # _r("#", "y", "#", "OY"),
    # _r("^", "y", "z", "AY"),
    # _r("#:^", "y", NOTHING, "IY"),
    # _r("#:^", "y", "i", "IY"),
    # _r(ANYTHING + ":", "y", NOTHING, "AY"),
    # _r(ANYTHING + ":", "y", "#", "AY"),
    # _r(ANYTHING + ":", "y", ".", "AY"),
    # _r(ANYTHING + ":", "y", "^+:#", "IH"),
    # _r(ANYTHING + ":", "y", "^#", "AY"),
    _r(ANYTHING, "y", ANYTHING, "IH"),
)

# 26 - z
GROUP_Z = (
    _r("z", "z", ANYTHING),
    _r(ANYTHING, "z", ANYTHING, "ZZ"),
)


ENGLISH_RULES = RuleTable((
    PUNCTUATION,
    GROUP_A, GROUP_B, GROUP_C, GROUP_D, GROUP_E, GROUP_F, GROUP_G, GROUP_H,
    GROUP_I, GROUP_J, GROUP_K, GROUP_L, GROUP_M, GROUP_N, GROUP_O, GROUP_P,
    GROUP_Q, GROUP_R, GROUP_S, GROUP_T, GROUP_U, GROUP_V, GROUP_W, GROUP_X,
    GROUP_Y, GROUP_Z,
))
