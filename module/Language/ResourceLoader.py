import os
from dataclasses import dataclass
from typing import Protocol

from module.Language.LanguageError import LanguageLoadError
from module.Localizer.Localizer import Localizer
from module.Utils.JSONTool import JSONTool


class LanguageResource(Protocol):
    """已加载的翻译资源句柄，由语言解析器独占持有。"""

    language: str

    def install(self) -> None: ...

    def release(self) -> None: ...


class ResourceLoader(Protocol):
    """按语言代码加载翻译资源，失败时抛出 LanguageLoadError 且没有任何副作用。"""

    def load(self, language: str) -> LanguageResource: ...


@dataclass(frozen=True, eq=False)
class JSONLanguageResource:
    """安装到 Localizer 的 JSON 翻译表。"""

    language: str
    messages: dict[str, str]

    def install(self) -> None:
        Localizer.install(self.language, self.messages)

    def release(self) -> None:
        Localizer.uninstall(self.messages)


class JSONResourceLoader():
    """从 <directory>/<language>.json 读取翻译表。"""

    def __init__(self, directory: str) -> None:
        self.directory = directory

    def get_path(self, language: str) -> str:
        return os.path.join(self.directory, f"{language}.json")

    def load(self, language: str) -> JSONLanguageResource:
        path = self.get_path(language)
        if not os.path.isfile(path):
            raise LanguageLoadError(language, f"translation file not found: {path}")

        try:
            data = JSONTool.load_file(path)
        except (OSError, ValueError) as e:
            raise LanguageLoadError(language, f"failed to read translation file {path}: {e}") from e

        if not isinstance(data, dict):
            raise LanguageLoadError(language, f"translation file is not a JSON object: {path}")

        messages = {str(k): str(v) for k, v in data.items() if isinstance(v, str)}
        if len(messages) == 0:
            raise LanguageLoadError(language, f"translation file contains no messages: {path}")

        return JSONLanguageResource(language = language, messages = messages)
