import os
import re
from typing import Protocol

from PySide6.QtCore import QLocale


class LocaleDetector(Protocol):
    """读取宿主环境的默认语言，并归约为可与语言目录比较的代码。"""

    def detect_primary_language(self) -> str: ...


class QtLocaleDetector():

    # 覆盖系统语言检测，便于演示与排查
    OVERRIDE_ENV: str = "LANGSWITCH_LOCALE"

    def __init__(self, override: str = None) -> None:
        if override is None:
            override = os.environ.get(__class__.OVERRIDE_ENV) or None
        self.override = override

    def detect_primary_language(self) -> str:
        if self.override is not None:
            name = self.override
        else:
            name = QLocale.system().name()

        return __class__.reduce(name)

    @staticmethod
    def reduce(name: str) -> str:
        # "es_ES"、"fr-CA"、"en_US.UTF-8" -> 主语言子标签的小写形式
        primary = re.split(r"[-_.@]", name.strip(), maxsplit = 1)[0]
        return primary.lower()
