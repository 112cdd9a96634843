"""Labels, translations and collection helpers for Python enums."""

from __future__ import annotations

from .core.descriptor import CaseDescriptor, EnumDescriptor, describe
from .core.enum_collections import (
    HasEnumCollections,
    name_values,
    names,
    to_options_array,
    to_select_array,
    value_names,
    values,
)
from .core.invokable import Invokable
from .core.labels import (
    HasLabel,
    LabelOverride,
    label,
    label_overrides,
    translated_label,
    translation_key,
)
from .errors import EctypeError, EnumUsageError, MissingCapabilityError
from .i18n import (
    GettextTranslator,
    MappingTranslator,
    NullTranslator,
    Translator,
    get_translator,
    set_translator,
)

__version__ = "0.1.0"

__all__ = [
    "CaseDescriptor",
    "EnumDescriptor",
    "describe",
    "HasEnumCollections",
    "names",
    "values",
    "name_values",
    "value_names",
    "to_select_array",
    "to_options_array",
    "Invokable",
    "HasLabel",
    "LabelOverride",
    "label",
    "label_overrides",
    "translated_label",
    "translation_key",
    "EctypeError",
    "EnumUsageError",
    "MissingCapabilityError",
    "GettextTranslator",
    "MappingTranslator",
    "NullTranslator",
    "Translator",
    "get_translator",
    "set_translator",
]
