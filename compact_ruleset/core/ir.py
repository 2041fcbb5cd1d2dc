"""Intermediate representation for letter-to-sound rule tables.

WHY: The compiler, the blob reader, the diagnostics and every emitter
all talk about the same things: rules, groups of rules, phoneme codes
and the compiled artifact. Keeping them in one module makes the IR the
stable contract between table authoring and blob packing.

HOW: Plain frozen dataclasses plus one IntEnum:
  PhonemeCode     — one member per phoneme/pause symbol, true value domain
  Rule            — (left, bracket, right, phonemes) tuple
  RuleTable       — exactly 27 ordered groups of rules
  RuleLocation    — points at one field of one rule, for error messages
  CompiledRuleset — the final blob plus the layout facts emitters need

RULES:
- Phoneme codes are stored unbiased (PA1 == 0); there is no +1/-1 anywhere
- Context strings are opaque: "" means anything, "$" means word boundary,
  everything else is passed through byte-for-byte
- Text fields encode as Latin-1 (one byte per character)
- Groups have an explicit length; there is no sentinel rule
- Group and rule order is never changed (first match wins downstream)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Tuple

from compact_ruleset.core.errors import MalformedTableError

# ---------------------------------------------------------------------------
# Binary format constants
# ---------------------------------------------------------------------------

GROUP_COUNT = 27
OFFSET_TABLE_ENTRIES = GROUP_COUNT + 1
OFFSET_SIZE = 2
OFFSET_TABLE_SIZE = OFFSET_TABLE_ENTRIES * OFFSET_SIZE
FIELDS_PER_RECORD = 4
RECORD_SIZE = FIELDS_PER_RECORD * OFFSET_SIZE

MAX_VALUE_LENGTH = 0xFF
"""Longest value a single length byte can describe."""

MAX_BLOB_SIZE = 0xFFFF
"""Largest blob addressable with 16-bit offsets."""

TEXT_ENCODING = "latin-1"

# Context sentinels
ANYTHING = ""
NOTHING = "$"

GROUP_NAMES: Tuple[str, ...] = ("punctuation",) + tuple("abcdefghijklmnopqrstuvwxyz")

RULE_FIELDS: Tuple[str, ...] = ("left", "bracket", "right", "phonemes")


def group_index(name: str) -> int:
    """Map a group name ("punctuation", "a" … "z") to its index."""
    try:
        return GROUP_NAMES.index(name.lower())
    except ValueError:
        raise ValueError("Unknown rule group '{}'".format(name)) from None


class PhonemeCode(IntEnum):
    """Phoneme and pause symbols understood by the speech runtime.

    Values are the codes the synthesizer consumes directly. AX shares a
    code with RR1 and is kept as an alias so rules can be written with
    either spelling.
    """

    PA1 = 0  # pause 10ms
    PA2 = 1  # pause 30ms
    PA3 = 2  # pause 50ms
    PA4 = 3  # pause 100ms
    PA5 = 4  # pause 200ms
    OY = 5  # bOY
    AY = 6  # skY
    EH = 7  # End
    KK3 = 8  # Comb
    PP = 9  # Pow
    JH = 10  # doDGe
    NN1 = 11  # thiN
    IH = 12  # sIt
    TT2 = 13  # To
    RR1 = 14  # Rural
    AX = 14  # sUcceed
    AH = 15  # pseudo-phoneme
    MM = 16  # Milk
    TT1 = 17  # parT
    DH1 = 18  # THey
    IY = 19  # sEE
    EY = 20  # bEIge
    DD1 = 21  # coulD
    UW1 = 22  # tO
    AO = 23  # AUght
    AA = 24  # hOt
    YY2 = 25  # Yes
    AE = 26  # hAt
    HH1 = 27  # He
    BB1 = 28  # Business
    TH = 29  # THin
    UH = 30  # bOOk
    UW2 = 31  # fOOd
    AW = 32  # OUt
    DD2 = 33  # Do
    GG3 = 34  # wiG
    VV = 35  # Vest
    GG1 = 36  # Got
    SH = 37  # SHip
    ZH = 38  # aZure
    RR2 = 39  # bRain
    FF = 40  # Food
    KK2 = 41  # sKy
    KK1 = 42  # Can't
    ZZ = 43  # Zoo
    NG = 44  # aNchor
    LL = 45  # Lake
    WW = 46  # Wool
    XR = 47  # repAIR
    WH = 48  # WHig
    YY1 = 49  # Yes
    CH = 50  # CHurch
    ER1 = 51  # fIR
    ER2 = 52  # fIR
    OW = 53  # bEAU
    DH2 = 54  # THey
    SS = 55  # veSt
    NN2 = 56  # No
    HH2 = 57  # Hoe
    OR = 58  # stORe
    AR = 59  # alARm
    YR = 60  # clEAR
    GG2 = 61  # Guest
    EL = 62  # saddLe
    BB2 = 63  # Business


def phonemes_from_names(names: str) -> Tuple[PhonemeCode, ...]:
    """Parse a space-separated list of phoneme symbols ("EH EY").

    Raises:
        ValueError: If a symbol is not a PhonemeCode member name.
    """
    codes = []
    for name in names.split():
        try:
            codes.append(PhonemeCode[name])
        except KeyError:
            raise ValueError("Unknown phoneme symbol '{}'".format(name)) from None
    return tuple(codes)


def _coerce_phonemes(phonemes: Iterable[int]) -> Tuple[PhonemeCode, ...]:
    codes = []
    for code in phonemes:
        if isinstance(code, bool) or not isinstance(code, int):
            raise ValueError("Phoneme code must be an integer, got {!r}".format(code))
        try:
            codes.append(PhonemeCode(code))
        except ValueError:
            raise ValueError("Unknown phoneme code {}".format(code)) from None
    return tuple(codes)


@dataclass(frozen=True)
class Rule:
    """One letter-to-sound rule.

    When ``bracket`` matches the input text and the surrounding text
    matches ``left`` and ``right``, the bracket text is replaced with
    ``phonemes``. The compiler never interprets the patterns.

    Attributes:
        left: Left context pattern ("" = anything, "$" = word boundary).
        bracket: Literal text the rule replaces.
        right: Right context pattern.
        phonemes: Ordered, possibly empty, phoneme codes to emit.
    """

    left: str
    bracket: str
    right: str
    phonemes: Tuple[PhonemeCode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "phonemes", _coerce_phonemes(self.phonemes))

    def encoded(self) -> Tuple[bytes, bytes, bytes, bytes]:
        """Return (left, bracket, right, phonemes) as raw byte values."""
        return (
            self.left.encode(TEXT_ENCODING),
            self.bracket.encode(TEXT_ENCODING),
            self.right.encode(TEXT_ENCODING),
            bytes(self.phonemes),
        )


@dataclass(frozen=True)
class RuleLocation:
    """One field of one rule: (group index, rule index, field name)."""

    group: int
    index: int
    field: str

    def __str__(self) -> str:
        return "group {} ({}) rule {} field '{}'".format(
            self.group, GROUP_NAMES[self.group], self.index, self.field,
        )


@dataclass(frozen=True)
class RuleTable:
    """The complete, ordered letter-to-sound rule table.

    WHY: The compiler needs a well-formed input whose group boundaries
    are known up front. Validating once at construction means no later
    stage has to scan for an end marker or guess a group length.

    HOW: Holds exactly GROUP_COUNT tuples of Rule. Group 0 is
    punctuation, groups 1–26 are the letters a–z. Construction checks
    the structure and raises MalformedTableError naming the group.

    RULES:
    - Exactly 27 groups, in fixed order
    - Every entry of every group is a Rule
    - Every text field is Latin-1 encodable
    - Groups may be empty
    """

    groups: Tuple[Tuple[Rule, ...], ...]

    def __post_init__(self) -> None:
        groups = tuple(self.groups)
        if len(groups) != GROUP_COUNT:
            raise MalformedTableError(
                "expected {} rule groups, got {}".format(GROUP_COUNT, len(groups)),
            )
        normalized = []
        for group_idx, group in enumerate(groups):
            if isinstance(group, (str, bytes)) or not isinstance(group, Sequence):
                raise MalformedTableError(
                    "group is not a sequence of rules", group=group_idx,
                )
            rules = tuple(group)
            for rule_idx, rule in enumerate(rules):
                if not isinstance(rule, Rule):
                    raise MalformedTableError(
                        "entry is {} rather than a Rule".format(type(rule).__name__),
                        group=group_idx, index=rule_idx,
                    )
                for name in ("left", "bracket", "right"):
                    value = getattr(rule, name)
                    if not isinstance(value, str):
                        raise MalformedTableError(
                            "field '{}' must be a string".format(name),
                            group=group_idx, index=rule_idx,
                        )
                    try:
                        value.encode(TEXT_ENCODING)
                    except UnicodeEncodeError:
                        raise MalformedTableError(
                            "field '{}' has characters outside Latin-1: {!r}".format(name, value),
                            group=group_idx, index=rule_idx,
                        ) from None
            normalized.append(rules)
        object.__setattr__(self, "groups", tuple(normalized))

    @classmethod
    def empty(cls) -> "RuleTable":
        """A table with every group empty."""
        return cls(tuple(() for _ in range(GROUP_COUNT)))

    @classmethod
    def from_mapping(cls, groups: dict) -> "RuleTable":
        """Build a table from {group name or index: rules}; missing groups are empty."""
        slots: list = [() for _ in range(GROUP_COUNT)]
        for key, rules in groups.items():
            idx = group_index(key) if isinstance(key, str) else key
            if not 0 <= idx < GROUP_COUNT:
                raise MalformedTableError("group index {} out of range".format(idx))
            slots[idx] = tuple(rules)
        return cls(tuple(slots))

    @property
    def rule_count(self) -> int:
        return sum(len(g) for g in self.groups)

    def iter_rules(self) -> Iterator[Tuple[int, int, Rule]]:
        """Yield (group index, rule index, rule) in table order."""
        for group_idx, group in enumerate(self.groups):
            for rule_idx, rule in enumerate(group):
                yield group_idx, rule_idx, rule


@dataclass(frozen=True)
class CompiledRuleset:
    """The compiled blob and the layout facts emitters report on.

    Attributes:
        blob: The complete little-endian artifact.
        group_offsets: The 28 absolute offsets from the blob header.
        data_offset: Absolute start of the data region (== group_offsets[27]).
        strings: Distinct context/bracket values, in blob order.
        phonemes: Distinct phoneme sequences, in blob order.
        table: The source table the blob was compiled from.
    """

    blob: bytes
    group_offsets: Tuple[int, ...]
    data_offset: int
    strings: Tuple[bytes, ...]
    phonemes: Tuple[bytes, ...]
    table: RuleTable

    @property
    def size(self) -> int:
        return len(self.blob)

    def group_length(self, group: int) -> int:
        """Number of rules stored for ``group``."""
        return (self.group_offsets[group + 1] - self.group_offsets[group]) // RECORD_SIZE
