from typing import Callable

from base.Base import Base
from base.BaseLanguage import BaseLanguage
from module.Language.ChangeOutcome import ChangeOutcome
from module.Language.LanguageCatalog import LanguageCatalog
from module.Language.LanguageError import LanguageLoadError
from module.Language.LanguageError import LanguageLoadFatalError
from module.Language.LocaleDetector import LocaleDetector
from module.Language.PreferenceStore import PreferenceStore
from module.Language.ResourceLoader import LanguageResource
from module.Language.ResourceLoader import ResourceLoader


class LanguageResolver(Base):
    """界面语言解析器。

    职责：
    - 启动时按 已保存偏好 > 系统语言 > 目录默认语言 的顺序选定并加载初始语言。
    - 处理界面发起的切换请求：校验、先持久化再加载、按回退链恢复。
    - 持有当前已安装的翻译资源，替换时先安装新资源再释放旧资源。

    约束：
    - 所有操作同步执行且不可重入，调用返回时状态已经结算完毕。
    - 回退链全部失败时不修改 current 与已安装资源（保留最后可用的语言）。
    - 通知只在 initialize / request 结束时发出，回退过程中不发出。
    """

    def __init__(
        self,
        catalog: LanguageCatalog,
        preference_store: PreferenceStore,
        locale_detector: LocaleDetector,
        resource_loader: ResourceLoader,
    ) -> None:
        super().__init__()

        self.catalog = catalog
        self.preference_store = preference_store
        self.locale_detector = locale_detector
        self.resource_loader = resource_loader

        self.current: str | None = None
        self.resource: LanguageResource | None = None
        self.initialized: bool = False

        self.changed_callbacks: list[Callable[[str], None]] = []
        self.load_failed_callbacks: list[Callable[[str, str], None]] = []

    @property
    def current_language(self) -> str | None:
        return self.current

    def available_languages(self) -> tuple[str, ...]:
        return self.catalog.all()

    # ========== 通知 ==========

    def on_language_changed(self, callback: Callable[[str], None]) -> Callable[[], None]:
        self.changed_callbacks.append(callback)
        return lambda: self.remove_callback(self.changed_callbacks, callback)

    def on_language_load_failed(self, callback: Callable[[str, str], None]) -> Callable[[], None]:
        self.load_failed_callbacks.append(callback)
        return lambda: self.remove_callback(self.load_failed_callbacks, callback)

    def remove_callback(self, callbacks: list[Callable], callback: Callable) -> None:
        if callback in callbacks:
            callbacks.remove(callback)

    def notify(self, callbacks: list[Callable], *args: str) -> None:
        # 单个回调异常不影响其余回调，也不改变本次操作的结果
        for callback in tuple(callbacks):
            try:
                callback(*args)
            except Exception as e:
                self.error(f"Language listener raised: {getattr(callback, '__qualname__', repr(callback))}", e)

    # ========== 初始化 ==========

    def initialize(self) -> str | None:
        if self.initialized == True:
            raise RuntimeError("LanguageResolver.initialize() must only be called once")
        self.initialized = True

        language = self.select_initial_language()
        try:
            effective = self.activate(language)
        except LanguageLoadFatalError as e:
            self.error(f"{e}, continuing without translations")
            self.notify(self.load_failed_callbacks, e.requested, e.reason)
            return None

        self.notify(self.changed_callbacks, effective)
        return effective

    def select_initial_language(self) -> str:
        saved = self.preference_store.get()
        if saved is not None and self.catalog.is_supported(saved):
            self.debug(f"Restored saved language: {saved}")
            return saved

        detected = self.detect_locale_language()
        if detected is not None:
            self.debug(f"Using system language: {detected}")
            return detected

        default = self.catalog.default_language()
        self.debug(f"Using default language: {default}")
        return default

    def detect_locale_language(self) -> str | None:
        # 系统语言不在目录中时视为未检测到
        detected = self.locale_detector.detect_primary_language()
        if self.catalog.is_supported(detected):
            return detected
        return None

    # ========== 加载与回退 ==========

    def activate(self, requested: str) -> str:
        candidates: list[str] = [requested]

        detected = self.detect_locale_language()
        if detected is not None and detected not in candidates:
            candidates.append(detected)

        default = self.catalog.default_language()
        if default not in candidates:
            candidates.append(default)

        last_error: LanguageLoadError | None = None
        for candidate in candidates:
            try:
                resource = self.resource_loader.load(candidate)
            except LanguageLoadError as e:
                self.debug(f"Failed to load language file: {e}")
                last_error = e
                continue

            self.install(resource)
            self.current = candidate
            if candidate == requested:
                self.debug(f"Successfully loaded language: {candidate}")
            else:
                self.warning(f"Requested language {requested} failed, using fallback language {candidate}")
            return candidate

        raise LanguageLoadFatalError(
            requested = requested,
            attempted = tuple(candidates),
            reason = last_error.reason if last_error is not None else "no candidate language",
        )

    def install(self, resource: LanguageResource) -> None:
        # 先安装新资源再释放旧资源，任何时刻都不会出现只移除未替换的状态
        previous = self.resource
        resource.install()
        self.resource = resource
        if previous is not None and previous is not resource:
            previous.release()

    # ========== 切换请求 ==========

    def request(self, language: str) -> ChangeOutcome:
        if not BaseLanguage.is_well_formed(language):
            outcome = ChangeOutcome.invalid_input(language)
            self.warning(outcome.reason)
            return outcome

        if not self.catalog.is_supported(language):
            outcome = ChangeOutcome.unsupported(language, self.catalog.all())
            self.warning(f"{language}: {outcome.reason}")
            return outcome

        if language == self.current:
            self.debug(f"Language {language} is already current")
            return ChangeOutcome.no_op(language)

        # 先持久化再加载，加载过程中崩溃也不会丢失用户的选择
        # 回退后实际生效的语言不会写回偏好存储
        self.preference_store.set(language)

        try:
            effective = self.activate(language)
        except LanguageLoadFatalError as e:
            self.error(f"{e}")
            self.notify(self.load_failed_callbacks, language, e.reason)
            return ChangeOutcome.failed(language, e.reason)

        self.info(f"Language switched to {effective} (requested: {language})")
        self.notify(self.changed_callbacks, effective)
        return ChangeOutcome.changed(language, effective)
