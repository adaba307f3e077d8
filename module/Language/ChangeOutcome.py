from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class ChangeOutcome:
    """一次语言切换请求的结果。"""

    class Status(StrEnum):

        CHANGED = "CHANGED"                                         # 已切换，effective 为实际生效的语言
        NO_OP = "NO_OP"                                             # 请求的语言已是当前语言
        FAILED = "FAILED"                                           # 回退链全部失败，当前语言保持不变
        UNSUPPORTED = "UNSUPPORTED"                                 # 格式正确但不在语言目录中
        INVALID_INPUT = "INVALID_INPUT"                             # 空值或格式错误

    status: Status
    requested: str | None = None
    effective: str | None = None
    available: tuple[str, ...] = ()
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status in (ChangeOutcome.Status.CHANGED, ChangeOutcome.Status.NO_OP)

    @classmethod
    def changed(cls, requested: str, effective: str) -> "ChangeOutcome":
        return cls(cls.Status.CHANGED, requested = requested, effective = effective)

    @classmethod
    def no_op(cls, requested: str) -> "ChangeOutcome":
        return cls(cls.Status.NO_OP, requested = requested, effective = requested)

    @classmethod
    def failed(cls, requested: str, reason: str) -> "ChangeOutcome":
        return cls(cls.Status.FAILED, requested = requested, reason = reason)

    @classmethod
    def unsupported(cls, requested: str, available: tuple[str, ...]) -> "ChangeOutcome":
        return cls(
            cls.Status.UNSUPPORTED,
            requested = requested,
            available = tuple(available),
            reason = f"Unsupported language. Available languages: {', '.join(available)}",
        )

    @classmethod
    def invalid_input(cls, requested: object) -> "ChangeOutcome":
        if requested is None or requested == "":
            reason = "Empty language code provided"
        else:
            reason = f"Malformed language code: {requested!r}"
        return cls(
            cls.Status.INVALID_INPUT,
            requested = requested if isinstance(requested, str) else None,
            reason = reason,
        )
