"""
Культура (язык/регион) и её распространение в Qt
"""

import re
import logging
from dataclasses import dataclass
from typing import Optional

from PyQt5.QtCore import QLocale

from localization_errors import InvalidArgumentError

log = logging.getLogger(__name__)

# "de", "de-DE", "zh-Hans-CN", "de_DE"
_CULTURE_RE = re.compile(r"^[A-Za-z]{2,3}([-_][A-Za-z0-9]{2,8})*$")


@dataclass(frozen=True)
class Culture:
    """Идентификатор культуры, например "de-DE". Сравнивается по имени"""
    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgumentError("Culture name cannot be empty or whitespace")
        name = self.name.strip().replace('_', '-')
        if not _CULTURE_RE.match(name):
            raise InvalidArgumentError(f"'{self.name}' is not a valid culture name")
        # frozen, поэтому через object.__setattr__
        object.__setattr__(self, 'name', name)

    @classmethod
    def of(cls, value) -> 'Culture':
        """Culture из строки или готового Culture"""
        if value is None:
            raise InvalidArgumentError("Culture cannot be None")
        if isinstance(value, Culture):
            return value
        if isinstance(value, QLocale):
            return cls(value.name())
        return cls(value)

    @property
    def parent(self) -> Optional['Culture']:
        """Родительская культура: de-DE -> de, de -> None"""
        if '-' not in self.name:
            return None
        return Culture(self.name.rsplit('-', 1)[0])

    def lookup_chain(self):
        """Имена культур от самой конкретной к нейтральной"""
        culture = self
        while culture is not None:
            yield culture.name
            culture = culture.parent

    def to_qlocale(self) -> QLocale:
        return QLocale(self.name.replace('-', '_'))

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class CultureChanged:
    """Данные сигнала о смене культуры"""
    new_culture: Culture

    def __str__(self):
        return f"NewCulture: {self.new_culture}"


def system_culture() -> Culture:
    """Культура операционной системы"""
    name = QLocale.system().name()
    try:
        return Culture(name)
    except InvalidArgumentError:
        # "C" и подобные имена
        log.warning("System locale %r is not a culture name, using en-US", name)
        return Culture('en-US')


def apply_ambient_culture(culture: Culture) -> None:
    """Выставить культуру как локаль Qt по умолчанию (форматирование чисел, дат)"""
    QLocale.setDefault(culture.to_qlocale())
    log.debug("Default QLocale set to %s", culture)
