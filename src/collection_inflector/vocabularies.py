"""The built-in US English vocabulary.

Registration order is precedence order: later rules are tried first. The
generic regex rules come first, then the irregular pairs, which therefore
override them. Uncountable words are checked before any rule.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional, Tuple

from .models import IrregularEntry
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)

PLURAL_RULES: List[Tuple[str, str]] = [
    ("$", "s"),
    ("s$", "s"),
    ("(ax|test)is$", "$1es"),
    ("(octop|vir|alumn|fung|cact|foc|hippopotam|radi|stimul|syllab|nucle)us$", "$1i"),
    ("(alias|bias|iris|status|campus|apparatus|virus|walrus|trellis)$", "$1es"),
    ("(buffal|tomat|volcan|ech|embarg|her|mosquit|potat|torped|vet)o$", "$1oes"),
    ("([dti])um$", "$1a"),
    ("sis$", "ses"),
    ("(?:([^f])fe|([lr])f)$", "$1$2ves"),
    ("(hive)$", "$1s"),
    ("([^aeiouy]|qu)y$", "$1ies"),
    ("(x|ch|ss|sh)$", "$1es"),
    ("(matr|vert|ind|d)ix|ex$", "$1ices"),
    ("([m|l])ouse$", "$1ice"),
    ("^(ox)$", "$1en"),
    ("(quiz)$", "$1zes"),
    ("(buz|blit|walt)z$", "$1zes"),
    ("(hoo|lea|loa|thie)f$", "$1ves"),
    ("(alumn|alg|larv|vertebr)a$", "$1ae"),
    ("(criteri|phenomen)on$", "$1a"),
]

SINGULAR_RULES: List[Tuple[str, str]] = [
    ("s$", ""),
    ("(n)ews$", "$1ews"),
    ("([dti])a$", "$1um"),
    ("(analy|ba|diagno|parenthe|progno|synop|the|ellip|empha|neuro|oa|paraly)ses$", "$1sis"),
    ("([^f])ves$", "$1fe"),
    ("(hive)s$", "$1"),
    ("(tive)s$", "$1"),
    ("([lr]|hoo|lea|loa|thie)ves$", "$1f"),
    ("(^zomb)?([^aeiouy]|qu)ies$", "$2y"),
    ("(s)eries$", "$1eries"),
    ("(m)ovies$", "$1ovie"),
    ("(x|ch|ss|sh)es$", "$1"),
    ("([m|l])ice$", "$1ouse"),
    ("(o)es$", "$1"),
    ("(shoe)s$", "$1"),
    ("(cris|ax|test)es$", "$1is"),
    ("(octop|vir|alumn|fung|cact|foc|hippopotam|radi|stimul|syllab|nucle)i$", "$1us"),
    ("(alias|bias|iris|status|campus|apparatus|virus|walrus|trellis)es$", "$1"),
    ("^(ox)en", "$1"),
    ("(matr|d)ices$", "$1ix"),
    ("(vert|ind)ices$", "$1ex"),
    ("(quiz)zes$", "$1"),
    ("(buz|blit|walt)zes$", "$1z"),
    ("(alumn|alg|larv|vertebr)ae$", "$1a"),
    ("(criteri|phenomen)a$", "$1on"),
]

IRREGULARS: List[IrregularEntry] = [
    IrregularEntry("person", "people"),
    IrregularEntry("man", "men"),
    IrregularEntry("child", "children"),
    IrregularEntry("sex", "sexes"),
    IrregularEntry("move", "moves"),
    IrregularEntry("goose", "geese"),
    IrregularEntry("wave", "waves"),
    IrregularEntry("die", "dice"),
    IrregularEntry("foot", "feet"),
    IrregularEntry("tooth", "teeth"),
    IrregularEntry("curriculum", "curricula"),
    IrregularEntry("database", "databases"),
    IrregularEntry("zombie", "zombies"),
    IrregularEntry("is", "are", match_ending=False),
    IrregularEntry("that", "those", match_ending=False),
    IrregularEntry("this", "these", match_ending=False),
    IrregularEntry("bus", "buses", match_ending=False),
]

UNCOUNTABLES: List[str] = [
    "equipment", "information", "rice", "money", "species", "series",
    "fish", "sheep", "deer", "aircraft", "oz", "tsp", "tbsp", "ml", "l",
    "water", "waters", "semen", "sperm", "bison", "grass", "hair", "mud",
    "elk", "luggage", "moose", "offspring", "salmon", "shrimp", "someone",
    "swine", "trout", "tuna", "corps", "scissors", "means",
]


def build_default() -> Vocabulary:
    """Populate a new vocabulary with the built-in English table."""
    vocabulary = Vocabulary()
    for pattern, replacement in PLURAL_RULES:
        vocabulary.add_plural(pattern, replacement)
    for pattern, replacement in SINGULAR_RULES:
        vocabulary.add_singular(pattern, replacement)
    vocabulary.add_irregulars(IRREGULARS)
    for word in UNCOUNTABLES:
        vocabulary.add_uncountable(word)
    return vocabulary


# ─── Process-wide default (built once, read-only afterwards) ───
_default_lock = threading.Lock()
_default: Optional[Vocabulary] = None


def default_vocabulary() -> Vocabulary:
    """Return the shared default vocabulary, building it on first use."""
    global _default

    vocabulary = _default
    if vocabulary is not None:
        return vocabulary

    with _default_lock:
        if _default is None:
            built = build_default()
            built.freeze()
            logger.debug("Default vocabulary built")
            # Publish only once construction has finished.
            _default = built
        return _default


def _reset_default_vocabulary():
    """Drop the cached default vocabulary so the next call rebuilds it.

    Test support only; normal code never rebuilds the default.
    """
    global _default
    with _default_lock:
        _default = None
