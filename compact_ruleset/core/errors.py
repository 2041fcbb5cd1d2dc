"""Error taxonomy for rule table compilation.

WHY: Every failure of the compiler is fatal and must tell the user
exactly which value, rule or group broke which limit. Typed exceptions
let callers (CLI, build scripts, tests) distinguish them.

HOW: All errors derive from RulesetError, itself a ValueError, so the
CLI's existing "bad input" handling covers them.

RULES:
- ValueTooLongError: a value does not fit behind a one-byte length prefix
- BlobTooLargeError: the blob does not fit 16-bit offset addressing
- MalformedTableError: the input table's structure is wrong
- MalformedBlobError: a blob being read back violates the layout
- None of these are retried or recovered from inside the compiler
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from compact_ruleset.core.ir import RuleLocation


class RulesetError(ValueError):
    """Base class for all rule table compilation errors."""


class ValueTooLongError(RulesetError):
    """Raised when a string or phoneme sequence exceeds 255 bytes.

    WHY: Values are stored behind a single length byte. Truncating would
    silently change what the runtime matches, so the table is rejected.

    RULES:
    - Message names the length, the limit, the value and its owning rule
    - owner is None when the value was not traced back to a rule
    """

    def __init__(self, value: bytes, limit: int, owner: Optional[RuleLocation] = None) -> None:
        self.value = value
        self.length = len(value)
        self.limit = limit
        self.owner = owner
        preview = value if len(value) <= 32 else value[:32] + b"..."
        where = " (first used by {})".format(owner) if owner is not None else ""
        super().__init__(
            "Value of {} bytes exceeds the {}-byte limit{}: {!r}".format(
                self.length, limit, where, preview,
            )
        )


class BlobTooLargeError(RulesetError):
    """Raised when the assembled blob exceeds 16-bit addressing.

    RULES:
    - Message includes the size, the limit and the overflow amount
    - Raised before any bytes are packed
    """

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        self.overflow = size - limit
        super().__init__(
            "Compiled ruleset is {:,} bytes, {:,} over the {:,}-byte limit "
            "of 16-bit offsets".format(size, self.overflow, limit)
        )


class MalformedTableError(RulesetError):
    """Raised when the rule table does not have the required structure."""

    def __init__(self, reason: str, group: Optional[int] = None, index: Optional[int] = None) -> None:
        self.reason = reason
        self.group = group
        self.index = index
        where = []
        if group is not None:
            where.append("group {}".format(group))
        if index is not None:
            where.append("rule {}".format(index))
        prefix = "Malformed rule table"
        if where:
            prefix += " at " + ", ".join(where)
        super().__init__("{}: {}".format(prefix, reason))


class MalformedBlobError(RulesetError):
    """Raised when a compiled blob cannot be decoded."""
