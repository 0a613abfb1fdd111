"""
Вью-модели демо-окна. Тексты берутся по именам свойств:
MainWindowViewModel + TitleText -> MainWindow_Title_Text
"""

from localization import Localizable, LocalizableApplication
from resource_keys import KeyPrefix, TwoPartKeyBuilder


class LocalizedViewModel(Localizable):
    """Вью-модель, которая после обновления текстов сообщает об этом виду"""

    def __init__(self, app: LocalizableApplication, on_localized=None):
        super().__init__()
        self.app = app
        self.on_localized = on_localized

    def text(self, property_name: str) -> str:
        return self.app.texts.resolve_for(self, property_name)

    def localize(self):
        self.load_texts()
        if self.on_localized is not None:
            self.on_localized(self)

    def load_texts(self):
        raise NotImplementedError


class MainWindowViewModel(LocalizedViewModel):

    def __init__(self, app, on_localized=None):
        super().__init__(app, on_localized)
        self.title_text = ''
        self.greeting_content = ''
        self.culture_caption = ''
        self.culture_name = ''

    def load_texts(self):
        self.title_text = self.text('TitleText')
        self.greeting_content = self.text('GreetingContent')
        self.culture_caption = self.text('CultureCaption')
        self.culture_name = self.app.current_culture.name

    def culture_changed_message(self) -> str:
        key = TwoPartKeyBuilder.for_prefix(KeyPrefix.APPLICATION_MESSAGES).with_identifier('CultureChanged')
        return f"{self.app.texts.resolve(key)}: {self.app.current_culture}"


class LanguageToolbarViewModel(LocalizedViewModel):

    def __init__(self, app, on_localized=None):
        super().__init__(app, on_localized)
        self.language_header = ''
        self.switch_tool_tip = ''

    def load_texts(self):
        self.language_header = self.text('LanguageHeader')
        self.switch_tool_tip = self.text('SwitchToolTip')
