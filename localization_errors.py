"""
Ошибки слоя локализации
"""


class LocalizationError(Exception):
    """Базовая ошибка локализации"""


class InvalidArgumentError(LocalizationError, ValueError):
    """Не передан обязательный аргумент или строка пустая"""


class ResourceNotFoundError(LocalizationError, LookupError):
    """Для ключа нет текста в активной культуре"""

    def __init__(self, key: str, message: str = None):
        self.key = key
        super().__init__(message or f"Text resource '{key}' could not be found")


class KeyDerivationError(ResourceNotFoundError):
    """Имя свойства не заканчивается ни одним известным суффиксом"""

    def __init__(self, class_name: str, property_name: str):
        self.class_name = class_name
        self.property_name = property_name
        super().__init__(
            f"{class_name}.{property_name}",
            f"No text resource key can be derived for "
            f"class '{class_name}' and property '{property_name}'",
        )


class LocalizationFanOutError(LocalizationError):
    """Один или несколько участников упали в localize()"""

    def __init__(self, failures):
        # список пар (участник, исключение)
        self.failures = list(failures)
        names = ", ".join(type(p).__name__ for p, _ in self.failures)
        super().__init__(f"{len(self.failures)} participant(s) failed to localize: {names}")


class ResourceFileError(LocalizationError, ValueError):
    """Файл ресурсов не читается как JSON-объект"""

    def __init__(self, file_name: str, message: str):
        self.file_name = file_name
        super().__init__(f"Resource file {file_name}: {message}")
