import os
import sys
import traceback

from PySide6.QtWidgets import QApplication
from qfluentwidgets import Theme
from qfluentwidgets import setTheme

from base.CLIManager import CLIManager
from base.LogManager import LogManager
from frontend.AppFluentWindow import AppFluentWindow
from module.AppConfig import AppConfig
from module.Language.LanguageCatalog import LanguageCatalog
from module.Language.LanguageEventBridge import LanguageEventBridge
from module.Language.LanguageResolver import LanguageResolver
from module.Language.LocaleDetector import QtLocaleDetector
from module.Language.PreferenceStore import ConfigPreferenceStore
from module.Language.ResourceLoader import JSONResourceLoader

# 捕获全局异常
def excepthook(exc_type, exc_value, exc_traceback) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        # 用户中断，不记录日志
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    LogManager.get().critical(f"Unhandled exception\n{''.join(traceback.format_exception(exc_type, exc_value, exc_traceback)).strip()}")

if __name__ == "__main__":
    # 捕获全局异常
    sys.excepthook = excepthook

    # 设置工作目录
    sys.path.append(os.path.dirname(os.path.abspath(sys.argv[0])))

    # 解析命令行参数
    cli = CLIManager.get()
    args = cli.parse()

    # 载入配置
    config_path = args.config if isinstance(args.config, str) else None
    config = AppConfig().load(config_path)
    LogManager.get().set_expert_mode(config.expert_mode == True)

    # 加载版本号
    version = ""
    if os.path.isfile("version.txt"):
        with open("version.txt", "r", encoding = "utf-8-sig") as reader:
            version = reader.read().strip()

    # 语言目录
    catalog = LanguageCatalog.from_base_language()
    if args.list_languages == True:
        cli.list_languages(catalog)
        sys.exit(0)

    # 打印日志
    LogManager.get().info(f"Language Switcher {version}".strip())

    # 创建全局应用对象，QLocale 与事件总线依赖它
    app = QApplication(sys.argv)

    # 设置主题
    setTheme(Theme.DARK if config.theme == AppConfig.Theme.DARK else Theme.LIGHT)

    # 创建语言解析器
    resolver = LanguageResolver(
        catalog = catalog,
        preference_store = ConfigPreferenceStore(config, config_path),
        locale_detector = QtLocaleDetector(),
        resource_loader = JSONResourceLoader(config.get_i18n_path()),
    )
    LanguageEventBridge(resolver).bind()
    resolver.initialize()
    cli.apply_language(resolver, args.language)

    # 创建全局窗口对象
    app_fluent_window = AppFluentWindow(resolver, version)
    app_fluent_window.show()

    # 进入事件循环，等待用户操作
    sys.exit(app.exec())
