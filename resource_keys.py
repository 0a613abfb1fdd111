"""
Построение ключей текстовых ресурсов по соглашению об именах

Ключ свойства вью-модели:  CustomerViewModel + CustomerNameText -> Customer_CustomerName_Text
Двухчастный ключ:          ApplicationMessages + SaveFailed    -> ApplicationMessages_SaveFailed
"""

from enum import Enum
from typing import Iterable

from localization_errors import InvalidArgumentError, KeyDerivationError

SEPARATOR = '_'
VIEW_MODEL_SUFFIX = 'ViewModel'
NOT_SET_MARKER = '[ not set ]'

# Свойства, к которым привязываются тексты в UI
BINDING_SUFFIXES = (
    'BusyContent',
    'Caption',
    'Content',
    'Header',
    'Text',
    'ToolTip',
)


def _require_text(value, name):
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"Argument '{name}' cannot be None or whitespace")


def derive_property_key(class_name: str, property_name: str,
                        suffixes: Iterable[str] = BINDING_SUFFIXES,
                        class_suffix: str = VIEW_MODEL_SUFFIX) -> str:
    """Ключ ресурса для свойства класса вью-модели"""
    _require_text(class_name, 'class_name')
    _require_text(property_name, 'property_name')

    prefix = class_name
    if class_suffix and class_name.endswith(class_suffix):
        prefix = class_name[:-len(class_suffix)]

    # Самый длинный суффикс из совпавших: BusyContent важнее Content
    matched = [s for s in suffixes if s and property_name.endswith(s)]
    if not matched:
        raise KeyDerivationError(class_name, property_name)
    suffix = max(matched, key=len)
    middle = property_name[:-len(suffix)]

    return SEPARATOR.join((prefix, middle, suffix))


class KeyPrefix(Enum):
    """Категории двухчастных ключей"""
    APPLICATION_MESSAGES = 'ApplicationMessages'
    OFTEN_USED_WORDS = 'OftenUsedWords'
    OFTEN_USED_PHRASES = 'OftenUsedPhrases'
    SHORTCUTS = 'Shortcuts'


class TwoPartKeyBuilder:
    """Строит ключ вида Prefix_Identifier"""

    def __init__(self, prefix: KeyPrefix):
        if not isinstance(prefix, KeyPrefix):
            raise InvalidArgumentError(f"'{prefix}' is not a known key prefix")
        self._prefix = prefix
        self._identifier = None

    @classmethod
    def for_prefix(cls, prefix: KeyPrefix) -> 'TwoPartKeyBuilder':
        return cls(prefix)

    def with_identifier(self, identifier: str) -> str:
        """Запомнить идентификатор и вернуть готовый ключ"""
        if identifier is not None and not isinstance(identifier, str):
            raise InvalidArgumentError(f"Identifier must be a string, got {type(identifier).__name__}")
        self._identifier = identifier
        return str(self)

    def __str__(self):
        identifier = self._identifier
        if not identifier or not identifier.strip():
            identifier = NOT_SET_MARKER
        return f"{self._prefix.value}{SEPARATOR}{identifier}"

    def __repr__(self):
        return f"TwoPartKeyBuilder({self})"


class TextResourceKey:
    """Неизменяемый ключ ресурса с категорией класса"""

    __slots__ = ('_key',)

    def __init__(self, key: str):
        _require_text(key, 'key')
        object.__setattr__(self, '_key', key)

    def __setattr__(self, name, value):
        raise AttributeError("TextResourceKey is immutable")

    @property
    def key(self) -> str:
        return self._key

    @classmethod
    def _for_class(cls, class_name: str, key: str) -> 'TextResourceKey':
        _require_text(key, 'key')
        return cls(f"{class_name}{SEPARATOR}{key}")

    @classmethod
    def for_application(cls, key: str) -> 'TextResourceKey':
        return cls._for_class('Application', key)

    @classmethod
    def for_shortcuts(cls, key: str) -> 'TextResourceKey':
        return cls._for_class('Shortcuts', key)

    @classmethod
    def for_often_used_words(cls, key: str) -> 'TextResourceKey':
        return cls._for_class('OftenUsedWords', key)

    @classmethod
    def for_often_used_phrases(cls, key: str) -> 'TextResourceKey':
        return cls._for_class('OftenUsedPhrases', key)

    def __eq__(self, other):
        if isinstance(other, TextResourceKey):
            return self._key == other._key
        return NotImplemented

    def __hash__(self):
        return hash(self._key)

    def __str__(self):
        return self._key

    def __repr__(self):
        return f"TextResourceKey({self._key!r})"
