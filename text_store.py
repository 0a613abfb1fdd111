"""
Хранилища текстов: ключ -> строка, раздельно по культурам

Поиск идёт по цепочке культур (de-DE -> de -> нейтральная), как у
ресурсов платформы. Нейтральная культура хранится под пустым именем.
"""

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol

from culture import Culture
from localization_errors import InvalidArgumentError, ResourceFileError

log = logging.getLogger(__name__)

NEUTRAL = ''


class TextStore(Protocol):
    def get(self, key: str, culture: Culture) -> Optional[str]:
        ...


class DictTextStore:
    """Тексты в памяти: {"de": {...}, "": {...}}"""

    def __init__(self, texts: Mapping[str, Mapping[str, str]] = None):
        self._texts: Dict[str, Dict[str, str]] = {}
        for culture_name, values in (texts or {}).items():
            self.add(culture_name, values)

    def add(self, culture_name: str, values: Mapping[str, str]) -> None:
        """Добавить (или дополнить) тексты культуры"""
        name = Culture(culture_name).name if culture_name else NEUTRAL
        self._texts.setdefault(name, {}).update(values)

    def get(self, key: str, culture: Culture) -> Optional[str]:
        for name in list(culture.lookup_chain()) + [NEUTRAL]:
            value = self._texts.get(name, {}).get(key)
            if value is not None and value.strip():
                return value
        return None


class JsonResourceStore(DictTextStore):
    """
    Тексты из JSON-файлов <base>.json, <base>.de.json, <base>.de-DE.json

    Файлы ищутся либо в каталоге (directory), либо в пакете (package)
    через importlib.resources. Каждая культура загружается один раз,
    при первом обращении.
    """

    def __init__(self, base_name: str = 'texts', package: str = None, directory=None):
        super().__init__()
        if not isinstance(base_name, str) or not base_name.strip():
            raise InvalidArgumentError("Argument 'base_name' cannot be None or whitespace")
        if package is None and directory is None:
            raise InvalidArgumentError("Either 'package' or 'directory' must be given")
        if package is not None and (not isinstance(package, str) or not package.strip()):
            raise InvalidArgumentError("Argument 'package' cannot be whitespace")

        self.base_name = base_name
        self.package = package
        self.directory = Path(directory) if directory is not None else None
        self._loaded = set()

    def _file_name(self, culture_name: str) -> str:
        if culture_name:
            return f"{self.base_name}.{culture_name}.json"
        return f"{self.base_name}.json"

    def _read(self, file_name: str) -> Optional[str]:
        if self.directory is not None:
            path = self.directory / file_name
            if not path.is_file():
                return None
            return path.read_text(encoding='utf-8')
        resource = resources.files(self.package).joinpath(file_name)
        if not resource.is_file():
            return None
        return resource.read_text(encoding='utf-8')

    def _ensure_loaded(self, culture_name: str) -> None:
        if culture_name in self._loaded:
            return

        file_name = self._file_name(culture_name)
        content = self._read(file_name)
        if content is None:
            log.debug("No resource file %s", file_name)
            self._loaded.add(culture_name)
            return
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ResourceFileError(file_name, f"invalid JSON ({e})") from e
        if not isinstance(data, dict):
            raise ResourceFileError(file_name, "must contain a JSON object")

        values = {}
        for key, value in data.items():
            if not isinstance(value, str):
                log.warning("Skipping %s in %s: value is %s, not a string",
                            key, file_name, type(value).__name__)
                continue
            values[key] = value
        self._texts.setdefault(culture_name, {}).update(values)
        # только после успешного разбора, иначе битый файл будет читаться снова
        self._loaded.add(culture_name)
        log.info("Loaded %d text resources from %s", len(values), file_name)

    def available_cultures(self):
        """Культуры, для которых есть файлы"""
        prefix = f"{self.base_name}."
        if self.directory is not None:
            entries = [p.name for p in self.directory.iterdir()]
        else:
            entries = [p.name for p in resources.files(self.package).iterdir()]
        names = []
        for entry in sorted(entries):
            if entry.startswith(prefix) and entry.endswith('.json'):
                middle = entry[len(prefix):-len('.json')]
                if not middle:
                    continue
                try:
                    names.append(Culture(middle))
                except InvalidArgumentError:
                    log.debug("Skipping %s, not a culture file", entry)
        return names

    def get(self, key: str, culture: Culture) -> Optional[str]:
        for name in list(culture.lookup_chain()) + [NEUTRAL]:
            self._ensure_loaded(name)
        return super().get(key, culture)
