"""
Сервис поиска локализованных текстов
"""

import logging
from typing import Callable

from culture import Culture
from localization_errors import InvalidArgumentError, KeyDerivationError, ResourceNotFoundError
from resource_keys import BINDING_SUFFIXES, derive_property_key
from text_store import TextStore

log = logging.getLogger(__name__)


class LocalizedTexts:
    """Возвращает тексты активной культуры по ключу или по имени свойства"""

    def __init__(self, store: TextStore, culture_provider: Callable[[], Culture],
                 suffixes=BINDING_SUFFIXES):
        if store is None:
            raise InvalidArgumentError("Argument 'store' cannot be None")
        if culture_provider is None:
            raise InvalidArgumentError("Argument 'culture_provider' cannot be None")
        self.store = store
        self.culture_provider = culture_provider
        self.suffixes = tuple(suffixes)

    def resolve(self, key) -> str:
        """Текст по ключу. Строка возвращается как есть, без форматирования"""
        key = None if key is None else str(key)
        if key is None or not key.strip():
            raise InvalidArgumentError("Argument 'key' cannot be None or whitespace")

        culture = self.culture_provider()
        value = self.store.get(key, culture)
        if value is None or not value.strip():
            log.warning("Text resource %s not found for culture %s", key, culture)
            raise ResourceNotFoundError(key)
        return value

    def resolve_for_property(self, class_name: str, property_name: str) -> str:
        """Текст для свойства вью-модели: OrderViewModel.TotalHeader -> Order_Total_Header"""
        try:
            key = derive_property_key(class_name, property_name, self.suffixes)
        except KeyDerivationError as e:
            log.warning("%s", e)
            raise ResourceNotFoundError(e.key, str(e)) from e
        return self.resolve(key)

    def resolve_for(self, owner, property_name: str) -> str:
        """То же, но имя класса берётся у класса или экземпляра owner"""
        if owner is None:
            raise InvalidArgumentError("Argument 'owner' cannot be None")
        cls = owner if isinstance(owner, type) else type(owner)
        return self.resolve_for_property(cls.__name__, property_name)
