"""
Custom Exceptions - Skate Score Calculator
skatescore/core/exceptions.py

Custom exception classes for scale-of-values lookups and element scoring.
"""


class ScoringException(Exception):
    """Base exception for scoring operations."""

    pass


class UnknownElementError(ScoringException):
    """Element code not present in the Scale of Values."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown element code: {code}")


class MissingGoeError(ScoringException):
    """Element exists but has no delta for the requested GOE."""

    def __init__(self, code: str, goe: int):
        self.code = code
        self.goe = goe
        super().__init__(f"No GOE={goe} for {code}")


class ScaleOfValuesLoadError(ScoringException):
    """Scale of Values document could not be read or parsed."""

    def __init__(self, message: str = "Failed to load SOV data"):
        self.message = message
        super().__init__(message)


class NotationError(ScoringException):
    """Text is not a valid element notation."""

    def __init__(self, text: str, reason: str = "unrecognised element"):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid element notation {text!r}: {reason}")


class IncompleteElementError(ScoringException):
    """Element entry is missing a required selection."""

    def __init__(self, message: str = "Element name has not been selected"):
        self.message = message
        super().__init__(message)
