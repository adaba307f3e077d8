import pytest

from base.LogManager import LogManager
from module.Localizer.Localizer import Localizer


class DummyLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def record(self, level: str):
        def write(msg: str, e: Exception | None = None, file: bool = True, console: bool = True) -> None:
            del e, file, console
            self.records.append((level, msg))

        return write

    def __getattr__(self, name: str):
        if name in ("debug", "info", "warning", "error", "critical"):
            return self.record(name)
        raise AttributeError(name)


# 测试中不写入真实的日志文件，同时便于断言日志级别
@pytest.fixture(autouse=True)
def dummy_logger(monkeypatch: pytest.MonkeyPatch) -> DummyLogger:
    logger = DummyLogger()
    monkeypatch.setattr(LogManager, "get", lambda: logger)
    return logger


# Localizer 的已安装翻译表是进程级状态，每个用例前后都清空
@pytest.fixture(autouse=True)
def reset_localizer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Localizer, "APP_LANGUAGE", None)
    monkeypatch.setattr(Localizer, "MESSAGES", None)
