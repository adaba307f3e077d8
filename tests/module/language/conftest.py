from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field

import pytest

from module.Language.LanguageCatalog import LanguageCatalog
from module.Language.LanguageError import LanguageLoadError
from module.Language.LanguageResolver import LanguageResolver


class MemoryPreferenceStore:
    def __init__(self, value: str | None = None) -> None:
        self.value = value
        self.writes: list[str] = []

    def get(self) -> str | None:
        return self.value

    def set(self, value: str) -> None:
        self.writes.append(value)
        self.value = value


class FixedLocaleDetector:
    def __init__(self, language: str) -> None:
        self.language = language

    def detect_primary_language(self) -> str:
        return self.language


@dataclass(eq=False)
class FakeResource:
    language: str
    journal: list[tuple[str, str]]
    installed: bool = False

    def install(self) -> None:
        self.installed = True
        self.journal.append(("install", self.language))

    def release(self) -> None:
        self.installed = False
        self.journal.append(("release", self.language))


@dataclass
class FakeResourceLoader:
    # 可成功加载的语言集合，其余语言一律加载失败
    loadable: set[str]
    attempts: list[str] = field(default_factory=list)
    journal: list[tuple[str, str]] = field(default_factory=list)

    def load(self, language: str) -> FakeResource:
        self.attempts.append(language)
        if language not in self.loadable:
            raise LanguageLoadError(language, "translation file not found")
        return FakeResource(language, self.journal)


@pytest.fixture
def catalog() -> LanguageCatalog:
    return LanguageCatalog(["en", "es", "fr"])


@pytest.fixture
def store() -> MemoryPreferenceStore:
    return MemoryPreferenceStore()


@pytest.fixture
def loader() -> FakeResourceLoader:
    return FakeResourceLoader(loadable={"en", "es", "fr"})


def build_resolver(
    catalog: LanguageCatalog,
    store: MemoryPreferenceStore,
    loader: FakeResourceLoader,
    locale: str = "en",
) -> LanguageResolver:
    return LanguageResolver(
        catalog=catalog,
        preference_store=store,
        locale_detector=FixedLocaleDetector(locale),
        resource_loader=loader,
    )
