import sys
import logging

from PyQt5.QtWidgets import (
    QApplication, QMainWindow, QVBoxLayout, QHBoxLayout, QWidget,
    QPushButton, QLabel, QShortcut
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QKeySequence

from language_toolbar import LanguageToolbar
from localization import LocalizableApplication
from localization_errors import LocalizationFanOutError
from logging_config import setup_logging
from resource_keys import TextResourceKey
from settings import settings
from text_store import JsonResourceStore
from view_models import MainWindowViewModel

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Главное окно приложения"""

    language_changed = pyqtSignal(str)

    def __init__(self, app: LocalizableApplication, cultures):
        super().__init__()
        self.app = app
        self.setGeometry(100, 100, 600, 300)

        self.view_model = MainWindowViewModel(app, self.apply_texts)

        # Главный виджет
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.setSpacing(0)
        main_layout.setContentsMargins(0, 0, 0, 0)

        # Панель языков
        self.toolbar = LanguageToolbar(app, cultures, self)
        self.toolbar.culture_selected.connect(self._set_language)
        main_layout.addWidget(self.toolbar)

        # Приветствие
        self.greeting = QLabel()
        self.greeting.setAlignment(Qt.AlignCenter)
        self.greeting.setStyleSheet("color: #505050; font-size: 14px;")
        main_layout.addWidget(self.greeting)

        # Текущая культура и кнопка закрытия
        bottom_layout = QHBoxLayout()
        bottom_layout.setContentsMargins(15, 5, 15, 5)
        self.culture_label = QLabel()
        bottom_layout.addWidget(self.culture_label)
        bottom_layout.addStretch()
        self.close_btn = QPushButton()
        self.close_btn.clicked.connect(self.close)
        bottom_layout.addWidget(self.close_btn)
        main_layout.addLayout(bottom_layout)

        # Регистрируем вью-модели; тексты появятся при первой локализации
        app.register(self.view_model)
        app.register(self.toolbar.view_model)
        app.culture_changed.connect(self.on_culture_changed)

        self._shortcuts = []

    def install_shortcuts(self):
        """Горячие клавиши из нейтральных ресурсов"""
        texts = self.app.texts
        quit_keys = texts.resolve(TextResourceKey.for_shortcuts('Quit'))
        next_keys = texts.resolve(TextResourceKey.for_shortcuts('NextLanguage'))

        quit_shortcut = QShortcut(QKeySequence(quit_keys), self)
        quit_shortcut.activated.connect(self.close)
        next_shortcut = QShortcut(QKeySequence(next_keys), self)
        next_shortcut.activated.connect(self._toggle_language)
        self._shortcuts = [quit_shortcut, next_shortcut]

    def _toggle_language(self):
        """Переключить язык на следующий"""
        self._set_language(self.toolbar.next_culture())

    def _set_language(self, culture_name: str):
        """Установить язык и обновить UI"""
        try:
            changed = self.app.set_culture(culture_name)
        except LocalizationFanOutError as e:
            # культура уже сменилась, не обновились только упавшие участники
            self.show_localization_failure(e)
            changed = True
        if changed:
            self.language_changed.emit(culture_name)

    def refresh_texts(self):
        """Загрузить тексты без смены культуры (при старте)"""
        try:
            self.app.localize_all()
        except LocalizationFanOutError as e:
            self.show_localization_failure(e)

    def show_localization_failure(self, error):
        log.error("%s", error)
        self.statusBar().showMessage(str(error))

    def on_culture_changed(self, event):
        log.info("Window got %s", event)

    def apply_texts(self, view_model):
        """Обновить текст элементов при смене языка"""
        self.setWindowTitle(view_model.title_text)
        self.greeting.setText(view_model.greeting_content)
        self.culture_label.setText(f"{view_model.culture_caption} {view_model.culture_name}")
        self.close_btn.setText(
            self.app.texts.resolve(TextResourceKey.for_often_used_words('Close'))
        )
        self.statusBar().showMessage(view_model.culture_changed_message())

    def closeEvent(self, event):
        """Завершение приложения"""
        self.app.deregister(self.view_model)
        self.app.deregister(self.toolbar.view_model)
        event.accept()


def create_store():
    if settings.RESOURCE_DIR is not None:
        return JsonResourceStore(settings.RESOURCE_BASE_NAME, directory=settings.RESOURCE_DIR)
    return JsonResourceStore(settings.RESOURCE_BASE_NAME, package=settings.RESOURCE_PACKAGE)


def main():
    setup_logging(log_file=settings.LOG_FILE, level=settings.LOG_LEVEL)

    qt_app = QApplication(sys.argv)
    qt_app.setAttribute(Qt.ApplicationAttribute.AA_DisableWindowContextHelpButton)

    store = create_store()
    app = LocalizableApplication(store=store)
    cultures = store.available_cultures() or [app.default_culture]

    window = MainWindow(app, cultures)
    window.install_shortcuts()
    window.refresh_texts()
    window.show()

    return qt_app.exec_()


if __name__ == "__main__":
    sys.exit(main())
