"""Exceptions raised by the inflection engine.

Failing to find a matching rule is never an error: the word is returned
unchanged. These exceptions cover programmer errors made while building a
vocabulary.
"""


class InflectionError(Exception):
    """Base class for every error this package raises."""


class InvalidRuleError(InflectionError, ValueError):
    """A rule pattern does not compile, or an irregular pair is empty."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid inflection rule {pattern!r}: {reason}")


class VocabularyFrozenError(InflectionError):
    """A rule was added to a vocabulary after it was frozen."""
