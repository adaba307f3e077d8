import codecs
import json
from pathlib import Path
from typing import Any

import json_repair
import orjson


class JSONTool:
    """统一的 JSON 工具入口。

    - 序列化使用 orjson，2 空格以外的缩进走标准库。
    - 反序列化兼容 UTF-8 BOM（手工编辑的配置与翻译文件常带 BOM）。
    - 配置文件读取失败时可使用 json_repair 修复轻微损坏的内容。
    """

    @classmethod
    def loads(cls, obj: str | bytes) -> Any:
        if isinstance(obj, bytes) and obj.startswith(codecs.BOM_UTF8):
            obj = obj.removeprefix(codecs.BOM_UTF8)
        try:
            return orjson.loads(obj)
        except orjson.JSONDecodeError:
            return json.loads(obj)

    @classmethod
    def repair_loads(cls, obj: str | bytes) -> Any:
        """反序列化 JSON，失败后自动修复。"""
        if isinstance(obj, bytes):
            obj = obj.removeprefix(codecs.BOM_UTF8).decode("utf-8", errors = "replace")
        try:
            return orjson.loads(obj)
        except orjson.JSONDecodeError:
            return json_repair.loads(obj, skip_json_loads = True)

    @classmethod
    def dumps_bytes(cls, obj: Any, *, indent: int = 0) -> bytes:
        if indent == 0:
            return orjson.dumps(obj)
        elif indent == 2:
            return orjson.dumps(obj, option = orjson.OPT_INDENT_2)
        else:
            return json.dumps(obj, ensure_ascii = False, indent = indent).encode("utf-8", errors = "backslashreplace")

    @classmethod
    def load_file(cls, path: str | Path, *, repair: bool = False) -> Any:
        """按 bytes 读取文件并反序列化，避免平台默认编码差异。"""
        with open(path, "rb") as reader:
            content = reader.read()

        if repair == True:
            return cls.repair_loads(content)
        else:
            return cls.loads(content)

    @classmethod
    def save_file(cls, path: str | Path, obj: Any, *, indent: int = 4) -> None:
        # 先完成序列化再打开文件，避免序列化失败时目标文件被截断
        data = cls.dumps_bytes(obj, indent = indent)

        with open(path, "wb") as writer:
            writer.write(data)
