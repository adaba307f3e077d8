from typing import Protocol

from module.AppConfig import AppConfig


class PreferenceStore(Protocol):
    """跨进程保存上次选择的界面语言代码。"""

    def get(self) -> str | None: ...

    def set(self, value: str) -> None: ...


class ConfigPreferenceStore():
    """基于 AppConfig.app_language 的偏好存储，写入后立即落盘。"""

    def __init__(self, config: AppConfig, path: str = None) -> None:
        self.config = config
        self.path = path

    def get(self) -> str | None:
        value = self.config.app_language
        if not isinstance(value, str) or value == "":
            return None
        return value

    def set(self, value: str) -> None:
        self.config.app_language = value
        self.config.save(self.path)
