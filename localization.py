"""
Система локализации приложения

Приложение хранит текущую культуру и список зарегистрированных объектов
(Localizable). При смене культуры испускается сигнал culture_changed,
а затем у каждого не приостановленного объекта вызывается localize().
"""

import uuid
import logging
import threading

from PyQt5.QtCore import QObject, pyqtSignal

from culture import Culture, CultureChanged, apply_ambient_culture, system_culture
from localization_errors import InvalidArgumentError, LocalizationFanOutError
from localized_texts import LocalizedTexts
from settings import settings

log = logging.getLogger(__name__)


class Localizable:
    """Объект, который показывает локализованный текст и умеет его обновлять"""

    def __init__(self):
        self._localization_id = uuid.uuid4()
        self.localization_suspended = False

    @property
    def id(self) -> uuid.UUID:
        return self._localization_id

    def localize(self):
        """Перечитать все тексты. Реализуется наследником"""
        raise NotImplementedError

    def suspend_localization(self):
        self.localization_suspended = True

    def resume_localization(self):
        # localize() сам не вызывается, тексты обновит следующая смена культуры
        self.localization_suspended = False


class LocalizableApplication(QObject):
    """Менеджер локализации приложения"""

    culture_changed = pyqtSignal(object)

    def __init__(self, texts: LocalizedTexts = None, store=None, parent=None):
        super().__init__(parent)
        self._lock = threading.RLock()
        self._participants = []
        self._current_culture = None
        self._default_culture = None

        if texts is None and store is not None:
            texts = LocalizedTexts(store, lambda: self.current_culture)
        self._texts = texts

    @property
    def texts(self) -> LocalizedTexts:
        return self._texts

    def provide_default_culture(self) -> Culture:
        """Культура по умолчанию, можно переопределить"""
        if settings.DEFAULT_CULTURE:
            return Culture(settings.DEFAULT_CULTURE)
        return system_culture()

    @property
    def default_culture(self) -> Culture:
        with self._lock:
            if self._default_culture is None:
                self._default_culture = self.provide_default_culture()
            return self._default_culture

    @property
    def current_culture(self) -> Culture:
        with self._lock:
            if self._current_culture is None:
                self._current_culture = self.default_culture
            return self._current_culture

    @current_culture.setter
    def current_culture(self, value):
        self.set_culture(value)

    def set_culture(self, culture) -> bool:
        """Сменить культуру. Возвращает False, если культура та же"""
        if culture is None:
            raise InvalidArgumentError("Culture cannot be None")
        culture = Culture.of(culture)

        with self._lock:
            if self._current_culture is not None and self._current_culture.name == culture.name:
                return False
            previous = self._current_culture
            self._current_culture = culture
            apply_ambient_culture(culture)

        log.info("Culture changed: %s -> %s", previous, culture)
        self.culture_changed.emit(CultureChanged(culture))
        self.localize_all()
        return True

    def localize_all(self):
        """Вызвать localize() у всех не приостановленных объектов"""
        with self._lock:
            snapshot = list(self._participants)

        failures = []
        for participant in snapshot:
            if participant.localization_suspended:
                log.debug("Skipping suspended %s", type(participant).__name__)
                continue
            try:
                participant.localize()
            except Exception as e:
                log.exception("Localization of %s failed", type(participant).__name__)
                failures.append((participant, e))

        if failures:
            raise LocalizationFanOutError(failures)

    def register(self, participant: Localizable):
        if participant is None:
            raise InvalidArgumentError("Participant cannot be None")
        with self._lock:
            if any(p.id == participant.id for p in self._participants):
                return
            self._participants.append(participant)
        log.debug("Registered %s (%s)", type(participant).__name__, participant.id)

    def deregister(self, participant: Localizable):
        if participant is None:
            raise InvalidArgumentError("Participant cannot be None")
        with self._lock:
            for index, p in enumerate(self._participants):
                if p.id == participant.id:
                    del self._participants[index]
                    log.debug("Deregistered %s (%s)", type(participant).__name__, participant.id)
                    return

    def count_registered(self) -> int:
        with self._lock:
            return len(self._participants)
