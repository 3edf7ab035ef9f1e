"""Error types raised by the blueprint codec, document model and placement engine.

All of them derive from ``ValueError`` so callers that only care about
"bad input" can catch that; ``BlueprintError`` narrows it to this package.
"""


class BlueprintError(ValueError):
    """Base class for every blueprint decoding / placement failure."""


class MalformedRecord(BlueprintError):
    """A single line has the wrong field count (or a bad field in strict mode)."""


class InvalidDocument(BlueprintError):
    """Too few lines, zero blocks, or a malformed block line."""


class InvalidHeader(InvalidDocument):
    """One of the three header lines has the wrong field count."""


class MissingAnchor(BlueprintError):
    """No anchor-tagged block survived classification."""


class DegenerateAnchor(BlueprintError):
    """The anchor block's scale makes the alignment undefined."""
