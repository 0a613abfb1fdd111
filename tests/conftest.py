import os

# Виджеты в тестах без дисплея
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtCore import QLocale
from PyQt5.QtWidgets import QApplication

from culture import Culture
from localization import Localizable, LocalizableApplication
from text_store import DictTextStore


class RecordingParticipant(Localizable):
    """Запоминает вызовы localize()"""

    def __init__(self, name='participant', calls=None, fail=False):
        super().__init__()
        self.name = name
        self.calls = calls if calls is not None else []
        self.fail = fail

    def localize(self):
        self.calls.append(self.name)
        if self.fail:
            raise RuntimeError(f"{self.name} broke")


class FixedCultureApplication(LocalizableApplication):

    def __init__(self, *args, default='en-US', **kwargs):
        super().__init__(*args, **kwargs)
        self.default_requests = 0
        self._fixed_default = default

    def provide_default_culture(self):
        self.default_requests += 1
        return Culture(self._fixed_default)


@pytest.fixture(autouse=True)
def restore_qlocale():
    saved = QLocale()
    yield
    QLocale.setDefault(saved)


@pytest.fixture
def store():
    return DictTextStore({
        '': {
            'Shortcuts_Quit': 'Ctrl+Q',
        },
        'en': {
            'Customer_CustomerName_Text': 'Customer name',
            'Order_Total_Header': 'Total',
            'ApplicationMessages_SaveFailed': 'Saving failed: {0}',
        },
        'de': {
            'Customer_CustomerName_Text': 'Kundenname',
            'Order_Total_Header': 'Summe',
        },
        'de-AT': {
            'Order_Total_Header': 'Gesamtsumme',
        },
    })


@pytest.fixture
def app(store):
    return FixedCultureApplication(store=store)


@pytest.fixture
def make_participant():
    calls = []

    def factory(name, fail=False):
        return RecordingParticipant(name, calls, fail)

    factory.calls = calls
    return factory


@pytest.fixture(scope="session")
def qapp():
    return QApplication.instance() or QApplication([])
