"""Rule-based English inflection for deriving collection names."""

from .errors import InflectionError, InvalidRuleError, VocabularyFrozenError
from .inflection import camelize, dasherize, hyphenate, pascalize, pluralize, singularize, underscore
from .models import IrregularEntry, Rule
from .naming import class_name_to_collection_name, collection_name, collection_name_for
from .vocabularies import default_vocabulary
from .vocabulary import Vocabulary

__all__ = [
    "InflectionError",
    "InvalidRuleError",
    "IrregularEntry",
    "Rule",
    "Vocabulary",
    "VocabularyFrozenError",
    "camelize",
    "class_name_to_collection_name",
    "collection_name",
    "collection_name_for",
    "dasherize",
    "default_vocabulary",
    "hyphenate",
    "pascalize",
    "pluralize",
    "singularize",
    "underscore",
]
