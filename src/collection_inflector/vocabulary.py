"""Ordered rule sets for English pluralization and singularization.

A Vocabulary holds two rule lists and a set of uncountable words. Lookups
walk a rule list from the most recently added rule to the oldest, so a
specific rule registered after a generic one overrides it. Irregular pairs
are stored as ordinary rules; uncountable words bypass the rules entirely.
"""

from __future__ import annotations

import logging
import re
from typing import FrozenSet, List, Optional, Sequence, Set, Tuple

from .errors import InvalidRuleError, VocabularyFrozenError
from .models import IrregularEntry, Rule

logger = logging.getLogger(__name__)


class Vocabulary:
    """Pluralization and singularization rules for one language."""

    def __init__(self):
        self._plurals: List[Rule] = []
        self._singulars: List[Rule] = []
        self._uncountables: Set[str] = set()
        self._frozen = False

    @property
    def plurals(self) -> Tuple[Rule, ...]:
        return tuple(self._plurals)

    @property
    def singulars(self) -> Tuple[Rule, ...]:
        return tuple(self._singulars)

    @property
    def uncountables(self) -> FrozenSet[str]:
        return frozenset(self._uncountables)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self):
        """Reject any further rule registration."""
        self._frozen = True
        logger.debug(
            "Vocabulary frozen with %d plural rules, %d singular rules, %d uncountables",
            len(self._plurals), len(self._singulars), len(self._uncountables),
        )

    def _check_mutable(self):
        if self._frozen:
            raise VocabularyFrozenError("Rules cannot be added to a frozen vocabulary")

    # ─── Registration ───

    def add_plural(self, pattern: str, replacement: str):
        """Add a pluralization rule, e.g. ("(bus)$", "$1es")."""
        self._check_mutable()
        self._plurals.append(Rule(pattern, replacement))

    def add_singular(self, pattern: str, replacement: str):
        """Add a singularization rule, e.g. ("(vert|ind)ices$", "$1ex")."""
        self._check_mutable()
        self._singulars.append(Rule(pattern, replacement))

    def add_irregular(self, singular: str, plural: str, match_ending: bool = True):
        """Add a word pair that no regular rule covers, e.g. "person"/"people".

        With match_ending the pair also applies as the suffix of a longer word
        ("superman" -> "supermen"); the first letter is captured so its case
        survives. Otherwise only the exact word matches.
        """
        if not singular or not plural:
            raise InvalidRuleError(f"{singular}/{plural}", "irregular words must not be empty")
        if match_ending:
            self.add_plural(
                "(" + re.escape(singular[0]) + ")" + re.escape(singular[1:]) + "$",
                "$1" + plural[1:],
            )
            self.add_singular(
                "(" + re.escape(plural[0]) + ")" + re.escape(plural[1:]) + "$",
                "$1" + singular[1:],
            )
        else:
            self.add_plural(f"^{re.escape(singular)}$", plural)
            self.add_singular(f"^{re.escape(plural)}$", singular)

    def add_irregulars(self, entries: Sequence[IrregularEntry]):
        for entry in entries:
            self.add_irregular(entry.singular, entry.plural, match_ending=entry.match_ending)

    def add_uncountable(self, word: str):
        """Add a word that is the same in singular and plural, e.g. "fish"."""
        self._check_mutable()
        self._uncountables.add(word.lower())

    # ─── Lookup ───

    def is_uncountable(self, word: str) -> bool:
        return word.lower() in self._uncountables

    def pluralize(self, word: Optional[str], input_is_known_to_be_singular: bool = True) -> Optional[str]:
        """Return the plural form of word.

        Pass input_is_known_to_be_singular=False when the word may already be
        plural; a word whose singular form pluralizes straight back to it is
        then returned unchanged.
        """
        if word is None:
            return None

        result = self._apply_rules(self._plurals, word)

        if input_is_known_to_be_singular:
            return word if result is None else result

        as_singular = self._apply_rules(self._singulars, word)
        as_singular_as_plural = self._apply_rules(self._plurals, as_singular)
        if (
            as_singular is not None
            and as_singular != word
            and as_singular + "s" != word
            and as_singular_as_plural == word
            and result != word
        ):
            return word

        return word if result is None else result

    def singularize(self, word: Optional[str], input_is_known_to_be_plural: bool = True) -> Optional[str]:
        """Return the singular form of word.

        Pass input_is_known_to_be_plural=False when the word may already be
        singular; a word whose plural form singularizes straight back to it is
        then returned unchanged.
        """
        if word is None:
            return None

        result = self._apply_rules(self._singulars, word)

        if input_is_known_to_be_plural:
            return word if result is None else result

        as_plural = self._apply_rules(self._plurals, word)
        as_plural_as_singular = self._apply_rules(self._singulars, as_plural)
        if (
            as_plural != word
            and word + "s" != as_plural
            and as_plural_as_singular == word
            and result != word
        ):
            return word

        return word if result is None else result

    def _apply_rules(self, rules: Sequence[Rule], word: Optional[str]) -> Optional[str]:
        """Transform word with the newest matching rule.

        Returns None when word is None or no rule matches, which callers treat
        as "leave the word alone".
        """
        if word is None:
            return None

        if self.is_uncountable(word):
            return word

        for rule in reversed(rules):
            result = rule.apply(word)
            if result is not None:
                return result
        return None
