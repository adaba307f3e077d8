from PySide6.QtWidgets import QVBoxLayout
from PySide6.QtWidgets import QWidget
from qfluentwidgets import BodyLabel
from qfluentwidgets import CardWidget
from qfluentwidgets import ComboBox
from qfluentwidgets import FluentWindow
from qfluentwidgets import StrongBodyLabel
from qfluentwidgets import TitleLabel

from base.Base import Base
from module.Language.ChangeOutcome import ChangeOutcome
from module.Language.LanguageResolver import LanguageResolver
from module.Localizer.Localizer import Localizer


class LanguagePage(QWidget, Base):

    def __init__(self, text: str, window: FluentWindow, resolver: LanguageResolver) -> None:
        super().__init__(window)
        self.setObjectName(text.replace(" ", "-"))

        self.resolver = resolver

        # 设置主容器
        self.root = QVBoxLayout(self)
        self.root.setSpacing(12)
        self.root.setContentsMargins(24, 24, 24, 24)  # 左、上、右、下

        # 标题与说明
        self.heading_label = TitleLabel(self)
        self.greeting_label = StrongBodyLabel(self)
        self.description_label = BodyLabel(self)
        self.description_label.setWordWrap(True)
        self.root.addWidget(self.heading_label)
        self.root.addWidget(self.greeting_label)
        self.root.addWidget(self.description_label)

        # 语言选择
        card = CardWidget(self)
        card_vbox = QVBoxLayout(card)
        card_vbox.setContentsMargins(16, 16, 16, 16)
        self.language_label = StrongBodyLabel(card)
        self.language_combo = ComboBox(card)
        for language in self.resolver.available_languages():
            self.language_combo.addItem(self.resolver.catalog.get_name(language), userData = language)
        self.language_combo.currentIndexChanged.connect(self.language_combo_changed)
        self.current_label = BodyLabel(card)
        card_vbox.addWidget(self.language_label)
        card_vbox.addWidget(self.language_combo)
        card_vbox.addWidget(self.current_label)
        self.root.addWidget(card)

        # 填充
        self.root.addStretch(1)

        self.retranslate()

    # 按当前已安装的翻译表刷新全部文本
    def retranslate(self) -> None:
        current = self.resolver.current_language
        current_name = self.resolver.catalog.get_name(current) if current is not None else "-"

        self.heading_label.setText(Localizer.tr("main.heading"))
        self.greeting_label.setText(Localizer.tr("main.greeting"))
        self.description_label.setText(Localizer.tr("main.description"))
        self.language_label.setText(Localizer.tr("main.language_label"))
        self.current_label.setText(Localizer.tr("main.current_language", language = current_name))

        # 同步下拉框但不触发切换
        languages = self.resolver.available_languages()
        if current in languages:
            self.language_combo.blockSignals(True)
            self.language_combo.setCurrentIndex(languages.index(current))
            self.language_combo.blockSignals(False)

    def language_combo_changed(self, index: int) -> None:
        language = self.language_combo.itemData(index)
        outcome = self.resolver.request(language)
        catalog = self.resolver.catalog

        if outcome.status == ChangeOutcome.Status.CHANGED and outcome.effective != outcome.requested:
            self.emit(Base.Event.APP_TOAST_SHOW, {
                "type": Base.ToastType.WARNING,
                "message": Localizer.tr(
                    "toast.language_fallback",
                    requested = catalog.get_name(outcome.requested),
                    language = catalog.get_name(outcome.effective),
                ),
            })
        elif outcome.status == ChangeOutcome.Status.CHANGED:
            self.emit(Base.Event.APP_TOAST_SHOW, {
                "type": Base.ToastType.SUCCESS,
                "message": Localizer.tr("toast.language_changed", language = catalog.get_name(outcome.effective)),
            })
        elif outcome.status in (ChangeOutcome.Status.UNSUPPORTED, ChangeOutcome.Status.INVALID_INPUT):
            self.emit(Base.Event.APP_TOAST_SHOW, {
                "type": Base.ToastType.ERROR,
                "message": outcome.reason,
            })

        # 失败时下拉框回到仍然生效的语言
        if outcome.status == ChangeOutcome.Status.FAILED:
            self.retranslate()
