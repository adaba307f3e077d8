import argparse
from argparse import Namespace
from typing import Self

from base.Base import Base
from module.Language.ChangeOutcome import ChangeOutcome
from module.Language.LanguageCatalog import LanguageCatalog
from module.Language.LanguageResolver import LanguageResolver

class CLIManager(Base):

    def __init__(self) -> None:
        super().__init__()

    @classmethod
    def get(cls) -> Self:
        if getattr(cls, "__instance__", None) is None:
            cls.__instance__ = cls()

        return cls.__instance__

    def parse(self, argv: list[str] = None) -> Namespace:
        parser = argparse.ArgumentParser(prog = "langswitch")
        parser.add_argument("--config", type = str, help = "path of app_config.json")
        parser.add_argument("--language", type = str, help = "switch to this language after startup")
        parser.add_argument("--list-languages", action = "store_true", help = "print supported languages and exit")

        # Qt 自带的参数（-platform 等）交给 QApplication 处理
        args, _ = parser.parse_known_args(argv)
        return args

    def list_languages(self, catalog: LanguageCatalog) -> list[str]:
        default = catalog.default_language()
        lines = []
        for language in catalog.all():
            line = f"{language}\t{catalog.get_name(language)}"
            if language == default:
                line = f"{line}\t(default)"
            lines.append(line)

        for line in lines:
            print(line)

        return lines

    def apply_language(self, resolver: LanguageResolver, language: str | None) -> ChangeOutcome | None:
        if language is None:
            return None

        outcome = resolver.request(language)
        if outcome.status == ChangeOutcome.Status.CHANGED:
            self.info(f"--language {language}: using {outcome.effective}")
        elif outcome.status == ChangeOutcome.Status.NO_OP:
            self.info(f"--language {language}: already active")
        else:
            self.warning(f"--language {language}: {outcome.reason}")

        return outcome
