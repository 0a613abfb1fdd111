from PyQt5.QtWidgets import QWidget, QPushButton, QLabel, QHBoxLayout
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from view_models import LanguageToolbarViewModel


class LanguageToolbar(QWidget):
    """Панель выбора языка"""
    culture_selected = pyqtSignal(str)

    def __init__(self, app, cultures, parent=None):
        super().__init__(parent)
        self.app = app
        self.cultures = [str(c) for c in cultures]
        self.buttons = {}

        self.setMaximumHeight(40)
        self.setStyleSheet("""
            QWidget {
                background-color: #f5f5f5;
            }
        """)

        self.view_model = LanguageToolbarViewModel(app, self.apply_texts)

        layout = QHBoxLayout(self)
        layout.setSpacing(10)
        layout.setContentsMargins(15, 5, 15, 5)

        # Заголовок
        self.header = QLabel()
        self.header.setFont(QFont("Arial", 9))
        self.header.setStyleSheet("color: #505050; font-weight: bold;")
        self.header.setAlignment(Qt.AlignVCenter)
        layout.addWidget(self.header)

        # Кнопка на каждую культуру
        for name in self.cultures:
            btn = QPushButton(name)
            btn.setObjectName(name)
            btn.setCheckable(True)
            btn.setStyleSheet("""
                QPushButton {
                    background-color: #e8e8e8;
                    border: 1px solid #d0d0d0;
                    border-radius: 5px;
                    padding: 5px 15px;
                }
                QPushButton:hover {
                    background-color: #f0f0f0;
                }
                QPushButton:checked {
                    background-color: #ffffff;
                    border: 2px solid #a0a0a0;
                }
            """)
            btn.clicked.connect(self.on_culture_clicked)
            layout.addWidget(btn)
            self.buttons[name] = btn

        layout.addStretch()

    def on_culture_clicked(self):
        """Обработчик нажатия на кнопку языка"""
        name = self.sender().objectName()
        self.culture_selected.emit(name)

    def next_culture(self) -> str:
        """Следующая культура по кругу"""
        current = self.current_button()
        if current is None:
            return self.cultures[0]
        return self.cultures[(self.cultures.index(current) + 1) % len(self.cultures)]

    def current_button(self):
        """Имя кнопки для текущей культуры: для de-DE подходит и "de" """
        for name in self.app.current_culture.lookup_chain():
            if name in self.buttons:
                return name
        return None

    def apply_texts(self, view_model):
        """Обновить текст элементов при смене языка"""
        self.header.setText(view_model.language_header)
        current = self.current_button()
        for name, btn in self.buttons.items():
            btn.setToolTip(view_model.switch_tool_tip)
            btn.setChecked(name == current)
