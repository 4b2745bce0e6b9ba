"""English inflection and casing helpers for collection name handling.

pluralize/singularize delegate to the shared default vocabulary. The casing
helpers are plain string maps.
"""

from __future__ import annotations

import re
from typing import Optional

from .vocabularies import default_vocabulary


def pluralize(word: Optional[str], input_is_known_to_be_singular: bool = True) -> Optional[str]:
    """Convert a singular English word to plural.

    Normally called with a singular word; pass input_is_known_to_be_singular=False
    when unsure, so an already-plural word ("people", "data") is kept as is.
    """
    return default_vocabulary().pluralize(word, input_is_known_to_be_singular)


def singularize(word: Optional[str], input_is_known_to_be_plural: bool = True) -> Optional[str]:
    """Convert a plural English word to singular.

    Pass input_is_known_to_be_plural=False when the word may already be singular.
    """
    return default_vocabulary().singularize(word, input_is_known_to_be_plural)


def pascalize(text: str) -> str:
    """UpperCamelCase: capitalize the first letter and each letter after "_", drop the "_".

    Examples:
      customer_order -> CustomerOrder
      user           -> User
    """
    return re.sub(r"(?:^|_)(.)", lambda m: m.group(1).upper(), text)


def camelize(text: str) -> str:
    """Same as pascalize but with the first character lower-cased."""
    word = pascalize(text)
    return word[:1].lower() + word[1:]


def underscore(text: str) -> str:
    """Split camel case, acronyms, hyphens and whitespace with underscores, then lower-case.

    Examples:
      CustomerOrder -> customer_order
      HTTPRequest   -> http_request
      some-title    -> some_title
    """
    text = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", text)
    text = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", text)
    text = re.sub(r"[-\s]", "_", text)
    return text.lower()


def dasherize(underscored_word: str) -> str:
    return underscored_word.replace("_", "-")


def hyphenate(underscored_word: str) -> str:
    return dasherize(underscored_word)
