import threading
from typing import Any


class Localizer():
    # 界面文本查询入口，持有当前已安装的翻译表，等价于 Qt 的全局 translator 安装点。

    LOCK: threading.Lock = threading.Lock()

    # 已安装的翻译表，None 表示尚未安装任何语言（界面显示未本地化的键名）
    APP_LANGUAGE: str | None = None
    MESSAGES: dict[str, str] | None = None

    @classmethod
    def install(cls, language: str, messages: dict[str, str]) -> None:
        with cls.LOCK:
            cls.APP_LANGUAGE = language
            cls.MESSAGES = messages

    @classmethod
    def uninstall(cls, messages: dict[str, str]) -> bool:
        # 仅移除仍处于安装状态的同一张表，已被替换的旧表不影响当前表
        with cls.LOCK:
            if cls.MESSAGES is not messages:
                return False
            cls.APP_LANGUAGE = None
            cls.MESSAGES = None
            return True

    @classmethod
    def get_app_language(cls) -> str | None:
        return cls.APP_LANGUAGE

    @classmethod
    def tr(cls, key: str, default: str | None = None, **kwargs: Any) -> str:
        # 查不到时返回默认值或键名本身
        messages = cls.MESSAGES or {}
        text = messages.get(key)
        if text is None:
            text = default if default is not None else key
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError, ValueError):
                return text
        return text
