from typing import Callable

from base.Base import Base
from base.EventManager import EventManager
from module.Language.LanguageResolver import LanguageResolver


class LanguageEventBridge():
    """把语言解析器的结算通知转发到界面事件总线。"""

    def __init__(self, resolver: LanguageResolver) -> None:
        self.resolver = resolver
        self.unsubscribers: list[Callable[[], None]] = []

    def bind(self) -> "LanguageEventBridge":
        self.unsubscribers.append(self.resolver.on_language_changed(self.language_changed))
        self.unsubscribers.append(self.resolver.on_language_load_failed(self.language_load_failed))
        return self

    def unbind(self) -> None:
        for unsubscribe in self.unsubscribers:
            unsubscribe()
        self.unsubscribers.clear()

    def language_changed(self, language: str) -> None:
        EventManager.get().emit_event(Base.Event.LANGUAGE_CHANGED, {
            "language": language,
        })

    def language_load_failed(self, language: str, reason: str) -> None:
        EventManager.get().emit_event(Base.Event.LANGUAGE_LOAD_FAILED, {
            "language": language,
            "reason": reason,
        })
