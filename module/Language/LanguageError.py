class LanguageLoadError(Exception):
    """单个语言资源加载失败，只在回退链内部处理，不会单独暴露给调用方。"""

    def __init__(self, language: str, reason: str) -> None:
        super().__init__(f"{language}: {reason}")
        self.language = language
        self.reason = reason


class LanguageLoadFatalError(Exception):
    """回退链中所有候选语言均加载失败。"""

    def __init__(self, requested: str, attempted: tuple[str, ...], reason: str) -> None:
        super().__init__(f"All language fallbacks failed for {requested} (attempted: {', '.join(attempted)})")
        self.requested = requested
        self.attempted = attempted
        self.reason = reason
