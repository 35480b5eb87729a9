"""Markdown 反转义

Qase 会把步骤文本中的 Markdown 特殊字符转义（如 ``200\\.``），比对前需还原。
"""

import re

_ESCAPED_CHAR = re.compile(r"\\([\\`*_{}\[\]()#+\-.!])")


def unescape_markdown(text: str | None) -> str | None:
    r"""将 ``\*``、``\_``、``\.`` 等转义序列还原为原字符"""
    if not text:
        return text
    return _ESCAPED_CHAR.sub(r"\1", text)
