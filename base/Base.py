from enum import StrEnum
from typing import Callable

from base.EventManager import EventManager
from base.LogManager import LogManager

class Base():

    # 事件
    class Event(StrEnum):

        LANGUAGE_CHANGED = "LANGUAGE_CHANGED"                              # 界面语言已切换
        LANGUAGE_LOAD_FAILED = "LANGUAGE_LOAD_FAILED"                      # 界面语言加载失败
        APP_TOAST_SHOW = "APP_TOAST_SHOW"                                  # 显示 Toast

    # Toast 类型
    class ToastType(StrEnum):

        INFO = "INFO"
        ERROR = "ERROR"
        SUCCESS = "SUCCESS"
        WARNING = "WARNING"

    # 构造函数
    def __init__(self) -> None:
        pass

    # DEBUG
    def debug(self, msg: str, e: Exception = None, file: bool = True, console: bool = True) -> None:
        LogManager.get().debug(msg, e, file, console)

    # INFO
    def info(self, msg: str, e: Exception = None, file: bool = True, console: bool = True) -> None:
        LogManager.get().info(msg, e, file, console)

    # WARNING
    def warning(self, msg: str, e: Exception = None, file: bool = True, console: bool = True) -> None:
        LogManager.get().warning(msg, e, file, console)

    # ERROR
    def error(self, msg: str, e: Exception = None, file: bool = True, console: bool = True) -> None:
        LogManager.get().error(msg, e, file, console)

    # CRITICAL
    def critical(self, msg: str, e: Exception = None, file: bool = True, console: bool = True) -> None:
        LogManager.get().critical(msg, e, file, console)

    # 触发事件
    def emit(self, event: Event, data: dict) -> None:
        EventManager.get().emit_event(event, data)

    # 订阅事件
    def subscribe(self, event: Event, handler: Callable) -> None:
        EventManager.get().subscribe(event, handler)

    # 取消订阅事件
    def unsubscribe(self, event: Event, handler: Callable) -> None:
        EventManager.get().unsubscribe(event, handler)
