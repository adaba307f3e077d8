import threading
import weakref
from dataclasses import dataclass
from enum import StrEnum
from typing import Any
from typing import Callable
from typing import Self

from PySide6.QtCore import QObject
from PySide6.QtCore import Qt
from PySide6.QtCore import Signal

from base.LogManager import LogManager


class EventManager(QObject):
    """界面事件总线（EventManager）。

    职责：
    - 将语言解析器的结算通知转发给界面层（发布-订阅）。
    - 所有回调统一在主线程（UI 线程）执行，emit 只负责入队。

    设计约束：
    - QObject 绑定方法自动弱引用：窗口销毁后回调自动失效，无需手动 unsubscribe。
    - 单个 handler 抛出异常只记录日志，不影响其余 handler。
    """

    @dataclass(frozen=True)
    class WeakHandler:
        owner_id: int
        func: Callable[..., Any]
        ref: weakref.WeakMethod

        def resolve(self) -> Callable[[Any, Any], None] | None:
            return self.ref()

    # 统一使用 object 作为信号参数类型，跨线程 queued emit 时可传递任意 Python 对象
    signal: Signal = Signal(object, object)

    def __init__(self) -> None:
        super().__init__()

        self.lock = threading.RLock()
        # 以 event 的字符串值作为唯一 key
        self.event_callbacks: dict[
            str,
            list[Callable[[Any, Any], None] | EventManager.WeakHandler],
        ] = {}
        self.owner_cleanup_connected: set[int] = set()

        self.signal.connect(self.process_event, Qt.ConnectionType.QueuedConnection)  # type: ignore

    @classmethod
    def get(cls) -> Self:
        if not hasattr(cls, "__instance__"):
            cls.__instance__ = cls()

        return cls.__instance__

    # 处理事件
    def process_event(self, event: object, data: object) -> None:
        event_key = self.get_event_value(event)
        with self.lock:
            entries = self.event_callbacks.get(event_key)
            if not entries:
                return

            handlers: list[Callable[[Any, Any], None]] = []
            cleaned: list[Callable[[Any, Any], None] | EventManager.WeakHandler] = []
            for entry in entries:
                if isinstance(entry, EventManager.WeakHandler):
                    resolved = entry.resolve()
                    if resolved is None:
                        continue
                    handlers.append(resolved)
                else:
                    handlers.append(entry)
                cleaned.append(entry)

            if cleaned:
                self.event_callbacks[event_key] = cleaned
            else:
                self.event_callbacks.pop(event_key, None)

        for handler in handlers:
            try:
                handler(event, data)
            except Exception as e:
                handler_name = getattr(handler, "__qualname__", repr(handler))
                LogManager.get().error(
                    f"Event handler raised: event={event_key} handler={handler_name} data_type={type(data).__name__}",
                    e,
                )

    def get_event_value(self, event: object) -> str:
        value = getattr(event, "value", None)
        if isinstance(value, str) and value != "":
            return value
        return str(event)

    # 触发事件
    def emit_event(self, event: StrEnum, data: object) -> None:
        self.signal.emit(event, data)

    # 订阅事件
    def subscribe(self, event: StrEnum, handler: Callable[[Any, Any], None]) -> None:
        if not callable(handler):
            return

        event_key = self.get_event_value(event)
        owner = getattr(handler, "__self__", None)
        func = getattr(handler, "__func__", None)

        if isinstance(owner, QObject) and callable(func):
            owner_id = id(owner)
            entry = EventManager.WeakHandler(
                owner_id = owner_id,
                func = func,
                ref = weakref.WeakMethod(handler),
            )

            need_connect_destroyed = False
            with self.lock:
                self.event_callbacks.setdefault(event_key, []).append(entry)
                if owner_id not in self.owner_cleanup_connected:
                    self.owner_cleanup_connected.add(owner_id)
                    need_connect_destroyed = True

            if need_connect_destroyed:
                owner.destroyed.connect(
                    lambda obj = None, owner_id = owner_id: self.cleanup_owner_subscriptions(owner_id)
                )
            return

        with self.lock:
            self.event_callbacks.setdefault(event_key, []).append(handler)

    def cleanup_owner_subscriptions(self, owner_id: int) -> None:
        with self.lock:
            self.owner_cleanup_connected.discard(owner_id)
            for event_key, entries in list(self.event_callbacks.items()):
                cleaned = [
                    entry for entry in entries
                    if not (isinstance(entry, EventManager.WeakHandler) and entry.owner_id == owner_id)
                ]
                if cleaned:
                    self.event_callbacks[event_key] = cleaned
                else:
                    self.event_callbacks.pop(event_key, None)

    # 取消订阅事件
    def unsubscribe(self, event: StrEnum, handler: Callable[[Any, Any], None]) -> None:
        event_key = self.get_event_value(event)
        with self.lock:
            entries = self.event_callbacks.get(event_key)
            if not entries:
                return

            owner = getattr(handler, "__self__", None)
            func = getattr(handler, "__func__", None)
            for idx, entry in enumerate(entries):
                if isinstance(owner, QObject) and callable(func):
                    matched = (
                        isinstance(entry, EventManager.WeakHandler)
                        and entry.owner_id == id(owner)
                        and entry.func == func
                    )
                else:
                    matched = not isinstance(entry, EventManager.WeakHandler) and entry == handler
                if matched:
                    entries.pop(idx)
                    break

            if not entries:
                self.event_callbacks.pop(event_key, None)
