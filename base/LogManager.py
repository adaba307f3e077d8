import logging
import os
import threading
import traceback
from logging.handlers import TimedRotatingFileHandler
from typing import Self

from rich.logging import RichHandler


class LogManager():

    # 日志目录，跟随数据目录
    LOG_DIR_NAME: str = "log"
    LOG_FILE_NAME: str = "app.log"

    LOCK: threading.Lock = threading.Lock()

    def __init__(self, log_dir: str = None) -> None:
        super().__init__()

        # 专家模式下控制台输出调试信息与完整堆栈
        self.expert_mode: bool = False

        if log_dir is None:
            data_dir = os.environ.get("LANGSWITCH_DATA_DIR") or os.environ.get("LANGSWITCH_APP_DIR") or "."
            log_dir = os.path.join(data_dir, __class__.LOG_DIR_NAME)

        # 文件日志实例
        os.makedirs(log_dir, exist_ok = True)
        self.logger_file = logging.getLogger("langswitch_file")
        self.logger_file.propagate = False
        self.logger_file.setLevel(logging.DEBUG)
        self.logger_file.handlers.clear()
        file_handler = TimedRotatingFileHandler(
            os.path.join(log_dir, __class__.LOG_FILE_NAME),
            when = "midnight",
            interval = 1,
            encoding = "utf-8",
            backupCount = 3,
        )
        file_handler.setFormatter(
            logging.Formatter("[%(asctime)s] [%(levelname)s] %(message)s", datefmt = "%Y-%m-%d %H:%M:%S")
        )
        self.logger_file.addHandler(file_handler)

        # 控制台日志实例
        self.logger_console = logging.getLogger("langswitch_console")
        self.logger_console.propagate = False
        self.logger_console.setLevel(logging.INFO)
        self.logger_console.handlers.clear()
        self.logger_console.addHandler(
            RichHandler(
                markup = True,
                show_path = False,
                rich_tracebacks = True,
                log_time_format = "[%X]",
                omit_repeated_times = False,
            )
        )

    @classmethod
    def get(cls) -> Self:
        with cls.LOCK:
            if getattr(cls, "__instance__", None) is None:
                cls.__instance__ = cls()

        return cls.__instance__

    def set_expert_mode(self, expert_mode: bool) -> None:
        self.expert_mode = expert_mode
        self.logger_console.setLevel(logging.DEBUG if expert_mode else logging.INFO)

    def is_expert_mode(self) -> bool:
        return self.expert_mode

    def debug(self, msg: str, e: Exception = None, file: bool = True, console: bool = True) -> None:
        self.write(logging.DEBUG, msg, e, file, console)

    def info(self, msg: str, e: Exception = None, file: bool = True, console: bool = True) -> None:
        self.write(logging.INFO, msg, e, file, console)

    def warning(self, msg: str, e: Exception = None, file: bool = True, console: bool = True) -> None:
        self.write(logging.WARNING, msg, e, file, console)

    def error(self, msg: str, e: Exception = None, file: bool = True, console: bool = True) -> None:
        self.write(logging.ERROR, msg, e, file, console)

    def critical(self, msg: str, e: Exception = None, file: bool = True, console: bool = True) -> None:
        self.write(logging.CRITICAL, msg, e, file, console)

    def write(self, level: int, msg: str, e: Exception | None, file: bool, console: bool) -> None:
        # 文件日志总是记录完整堆栈，控制台仅在专家模式下记录
        if e is None:
            file_msg = msg
            console_msg = msg
        elif self.expert_mode == False:
            file_msg = f"{msg}\n{self.get_traceback(e)}\n"
            console_msg = f"{msg} {e}"
        else:
            file_msg = f"{msg}\n{self.get_traceback(e)}\n"
            console_msg = file_msg

        if file == True:
            self.logger_file.log(level, file_msg)
        if console == True:
            self.logger_console.log(level, console_msg)

    def get_traceback(self, e: Exception) -> str:
        return f"{e}\n{(''.join(traceback.format_exception(None, e, e.__traceback__))).strip()}"
