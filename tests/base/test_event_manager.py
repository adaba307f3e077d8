from unittest.mock import MagicMock

import pytest

from base.Base import Base
from base.EventManager import EventManager


@pytest.fixture
def event_manager() -> EventManager:
    return EventManager()


def test_process_event_calls_subscribers_in_order(event_manager: EventManager) -> None:
    calls: list[str] = []
    event_manager.subscribe(Base.Event.LANGUAGE_CHANGED, lambda event, data: calls.append(f"a:{data['language']}"))
    event_manager.subscribe(Base.Event.LANGUAGE_CHANGED, lambda event, data: calls.append(f"b:{data['language']}"))

    event_manager.process_event(Base.Event.LANGUAGE_CHANGED, {"language": "es"})

    assert calls == ["a:es", "b:es"]


def test_process_event_ignores_other_events(event_manager: EventManager) -> None:
    handler = MagicMock()
    event_manager.subscribe(Base.Event.LANGUAGE_LOAD_FAILED, handler)

    event_manager.process_event(Base.Event.LANGUAGE_CHANGED, {})

    handler.assert_not_called()


def test_raising_handler_is_logged_and_isolated(event_manager: EventManager, dummy_logger) -> None:
    second = MagicMock()
    event_manager.subscribe(Base.Event.APP_TOAST_SHOW, MagicMock(side_effect=RuntimeError("bad handler")))
    event_manager.subscribe(Base.Event.APP_TOAST_SHOW, second)

    event_manager.process_event(Base.Event.APP_TOAST_SHOW, {"message": "hi"})

    second.assert_called_once_with(Base.Event.APP_TOAST_SHOW, {"message": "hi"})
    assert [level for level, _ in dummy_logger.records] == ["error"]


def test_unsubscribe_removes_handler(event_manager: EventManager) -> None:
    handler = MagicMock()
    event_manager.subscribe(Base.Event.LANGUAGE_CHANGED, handler)
    event_manager.unsubscribe(Base.Event.LANGUAGE_CHANGED, handler)

    event_manager.process_event(Base.Event.LANGUAGE_CHANGED, {})

    handler.assert_not_called()
    assert Base.Event.LANGUAGE_CHANGED.value not in event_manager.event_callbacks


def test_subscribe_ignores_non_callable(event_manager: EventManager) -> None:
    event_manager.subscribe(Base.Event.LANGUAGE_CHANGED, None)

    assert event_manager.event_callbacks == {}


def test_event_key_uses_enum_value(event_manager: EventManager) -> None:
    assert event_manager.get_event_value(Base.Event.LANGUAGE_CHANGED) == "LANGUAGE_CHANGED"
    assert event_manager.get_event_value("CUSTOM") == "CUSTOM"
