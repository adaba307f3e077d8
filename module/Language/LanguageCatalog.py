from typing import Iterable
from typing import Iterator

from base.BaseLanguage import BaseLanguage


class LanguageCatalog():
    """支持的界面语言集合，构建后不可变，第一个条目为默认（兜底）语言。"""

    def __init__(self, languages: Iterable[str]) -> None:
        # 去重并保留首次出现的位置
        self.languages: tuple[str, ...] = tuple(dict.fromkeys(str(v) for v in languages))
        if len(self.languages) == 0:
            raise ValueError("Language catalog must contain at least one language")

    @classmethod
    def from_base_language(cls) -> "LanguageCatalog":
        return cls(BaseLanguage.get_languages())

    def is_supported(self, language: object) -> bool:
        return isinstance(language, str) and language in self.languages

    def default_language(self) -> str:
        return self.languages[0]

    def all(self) -> tuple[str, ...]:
        return self.languages

    def get_name(self, language: str) -> str:
        return BaseLanguage.get_name_native(language) or language

    def __contains__(self, language: object) -> bool:
        return self.is_supported(language)

    def __iter__(self) -> Iterator[str]:
        return iter(self.languages)

    def __len__(self) -> int:
        return len(self.languages)

    def __repr__(self) -> str:
        return f"LanguageCatalog({list(self.languages)})"
