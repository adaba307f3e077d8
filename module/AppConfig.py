"""应用级别配置

存储跟随用户环境的设置：
- 界面语言（上次选择的语言代码）
- 主题
- 专家模式
- 翻译资源目录
"""

import dataclasses
import os
import threading
from typing import ClassVar
from typing import Self

from base.LogManager import LogManager
from module.Utils.JSONTool import JSONTool

@dataclasses.dataclass
class AppConfig:
    """应用级别配置"""

    class Theme:
        DARK = "DARK"
        LIGHT = "LIGHT"

    # 外观
    theme: str = "LIGHT"
    app_language: str = ""

    # 翻译资源目录，相对路径基于应用目录
    i18n_dir: str = "resource/i18n"

    # 专家模式
    expert_mode: bool = False

    # 类属性
    CONFIG_LOCK: ClassVar[threading.Lock] = threading.Lock()

    @staticmethod
    def get_app_dir() -> str:
        return os.environ.get("LANGSWITCH_APP_DIR") or "."

    @staticmethod
    def get_config_path() -> str:
        """获取配置文件路径"""
        data_dir = os.environ.get("LANGSWITCH_DATA_DIR")
        app_dir = os.environ.get("LANGSWITCH_APP_DIR")
        # 便携式环境使用 data_dir/app_config.json
        if data_dir and app_dir and data_dir != app_dir:
            return os.path.join(data_dir, "app_config.json")
        # 默认使用 resource/app_config.json
        return os.path.join(app_dir or ".", "resource", "app_config.json")

    def get_i18n_path(self) -> str:
        if os.path.isabs(self.i18n_dir):
            return self.i18n_dir
        return os.path.join(__class__.get_app_dir(), self.i18n_dir)

    def load(self, path: str = None) -> Self:
        """加载配置"""
        if path is None:
            path = __class__.get_config_path()

        with __class__.CONFIG_LOCK:
            try:
                if os.path.isfile(path):
                    config = JSONTool.load_file(path, repair = True)
                    if isinstance(config, dict):
                        for k, v in config.items():
                            if hasattr(self, k):
                                setattr(self, k, v)
            except Exception as e:
                LogManager.get().error(f"Failed to read config file: {path}", e)

        return self

    def save(self, path: str = None) -> Self:
        """保存配置"""
        if path is None:
            path = __class__.get_config_path()

        with __class__.CONFIG_LOCK:
            try:
                os.makedirs(os.path.dirname(path) or ".", exist_ok = True)
                JSONTool.save_file(path, dataclasses.asdict(self), indent = 4)
            except Exception as e:
                LogManager.get().error(f"Failed to write config file: {path}", e)

        return self
