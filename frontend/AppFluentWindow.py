from PySide6.QtCore import Qt
from qfluentwidgets import FluentIcon
from qfluentwidgets import FluentWindow
from qfluentwidgets import InfoBar
from qfluentwidgets import InfoBarPosition
from qfluentwidgets import setThemeColor

from base.Base import Base
from frontend.LanguagePage import LanguagePage
from module.Language.LanguageResolver import LanguageResolver
from module.Localizer.Localizer import Localizer

class AppFluentWindow(FluentWindow, Base):

    APP_WIDTH: int = 800
    APP_HEIGHT: int = 560

    THEME_COLOR: str = "#BCA483"

    def __init__(self, resolver: LanguageResolver, version: str = "") -> None:
        super().__init__()

        self.resolver = resolver
        self.version = version

        # 设置主题颜色
        setThemeColor(AppFluentWindow.THEME_COLOR)

        # 设置窗口属性
        self.resize(AppFluentWindow.APP_WIDTH, AppFluentWindow.APP_HEIGHT)
        self.setMinimumSize(AppFluentWindow.APP_WIDTH, AppFluentWindow.APP_HEIGHT)
        self.titleBar.iconLabel.hide()

        # 添加页面
        self.language_page = LanguagePage("language_page", self, resolver)
        self.addSubInterface(self.language_page, FluentIcon.LANGUAGE, Localizer.tr("main.language_label"))

        # 注册事件
        self.subscribe(Base.Event.APP_TOAST_SHOW, self.show_toast)
        self.subscribe(Base.Event.LANGUAGE_CHANGED, self.language_changed)
        self.subscribe(Base.Event.LANGUAGE_LOAD_FAILED, self.language_load_failed)

        self.retranslate()

    def retranslate(self) -> None:
        title = Localizer.tr("app.title", default = "Language Switcher")
        self.setWindowTitle(f"{title} {self.version}".strip())
        self.navigationInterface.widget(self.language_page.objectName()).setText(Localizer.tr("main.language_label"))
        self.language_page.retranslate()

    # 响应语言切换事件
    def language_changed(self, event: str, data: dict) -> None:
        self.retranslate()

    # 响应语言加载失败事件，仍使用最后可用的语言
    def language_load_failed(self, event: str, data: dict) -> None:
        self.retranslate()
        self.emit(Base.Event.APP_TOAST_SHOW, {
            "type": Base.ToastType.ERROR,
            "message": Localizer.tr(
                "toast.language_load_failed",
                language = self.resolver.catalog.get_name(data.get("language", "")),
                reason = data.get("reason", ""),
            ),
            "duration": 5000,
        })

    # 响应显示 Toast 事件
    def show_toast(self, event: str, data: dict) -> None:
        toast_type = data.get("type", Base.ToastType.INFO)
        toast_message = data.get("message", "")
        toast_duration = data.get("duration", 2500)

        if toast_type == Base.ToastType.ERROR:
            toast_func = InfoBar.error
        elif toast_type == Base.ToastType.WARNING:
            toast_func = InfoBar.warning
        elif toast_type == Base.ToastType.SUCCESS:
            toast_func = InfoBar.success
        else:
            toast_func = InfoBar.info

        toast_func(
            title = "",
            content = toast_message,
            parent = self,
            duration = toast_duration,
            orient = Qt.Orientation.Horizontal,
            position = InfoBarPosition.TOP,
            isClosable = True,
        )
