import re
from enum import StrEnum


class BaseLanguage():

    class Enum(StrEnum):

        EN = "en"                                           # 英文 (English)
        ES = "es"                                           # 西班牙文 (Spanish)
        FR = "fr"                                           # 法文 (French)

    # 界面语言名称，第一个条目为默认语言
    LANGUAGE_NAMES: dict[str, dict[str, str]] = {
        Enum.EN: {"native": "English", "en": "English"},
        Enum.ES: {"native": "Español", "en": "Spanish"},
        Enum.FR: {"native": "Français", "en": "French"},
    }

    # 主标签 2-3 位字母，可选若干 2-8 位子标签，例如 en、pt-BR、zh_Hans
    WELL_FORMED_PATTERN: re.Pattern = re.compile(r"[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{2,8})*")

    @classmethod
    def is_well_formed(cls, language: object) -> bool:
        return isinstance(language, str) and cls.WELL_FORMED_PATTERN.fullmatch(language) is not None

    @classmethod
    def get_name_native(cls, language: str) -> str:
        return cls.LANGUAGE_NAMES.get(language, {}).get("native", "")

    @classmethod
    def get_name_en(cls, language: str) -> str:
        return cls.LANGUAGE_NAMES.get(language, {}).get("en", "")

    @classmethod
    def get_languages(cls) -> list[str]:
        return [str(language) for language in cls.LANGUAGE_NAMES.keys()]
