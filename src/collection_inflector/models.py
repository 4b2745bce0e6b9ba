"""Data structures for inflection rules and batch results."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import InvalidRuleError

# Rule tables use "$1", "${1}" and "$$" (a literal "$") in replacements.
_TEMPLATE_TOKEN_RE = re.compile(r"\$(?:(\$)|\{(\d+)\}|(\d+))")


def _translate_replacement(replacement: str) -> str:
    """Rewrite "$"-style replacement tokens into the form re.sub expects."""

    def _token(m):
        if m.group(1):
            return "$"
        return "\\g<" + (m.group(2) or m.group(3)) + ">"

    escaped = replacement.replace("\\", "\\\\")
    return _TEMPLATE_TOKEN_RE.sub(_token, escaped)


@dataclass(frozen=True)
class Rule:
    """A single case-insensitive pattern -> replacement transformation.

    The replacement refers to groups as "$1" or "${1}"; "$$" is a literal "$".
    """

    pattern: str
    replacement: str
    _regex: re.Pattern = field(init=False, repr=False, compare=False)
    _template: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        try:
            regex = re.compile(self.pattern, re.IGNORECASE)
        except re.error as e:
            raise InvalidRuleError(self.pattern, str(e)) from e
        object.__setattr__(self, "_regex", regex)
        object.__setattr__(self, "_template", _translate_replacement(self.replacement))

    def apply(self, word: str) -> Optional[str]:
        """Return the transformed word, or None when the pattern does not match."""
        if not self._regex.search(word):
            return None
        return self._regex.sub(self._template, word)


@dataclass(frozen=True)
class IrregularEntry:
    singular: str
    plural: str
    # False restricts the pair to whole words ("is" must not match "this").
    match_ending: bool = True


class Operation(Enum):
    PLURALIZE = "pluralize"
    SINGULARIZE = "singularize"
    PASCALIZE = "pascalize"
    CAMELIZE = "camelize"
    UNDERSCORE = "underscore"
    DASHERIZE = "dasherize"
    COLLECTION = "collection"


@dataclass
class InflectionResult:
    word: str
    result: str
    operation: Operation

    @property
    def changed(self) -> bool:
        return self.word != self.result

    @property
    def dedup_key(self):
        return (self.word, self.operation)
