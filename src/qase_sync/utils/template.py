"""环境变量插值工具

支持 ${ENV_VAR} 与 ${ENV_VAR:-default} 语法，将配置值中的环境变量引用替换为实际值。
"""

import os
import re
from typing import Any

_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")


def interpolate_env(value: str) -> str:
    """将字符串中的 ${VAR} 替换为环境变量值，未设置且无默认值时报错"""

    def _replace(match: re.Match) -> str:
        var_name, default = match.group(1), match.group(2)
        env_val = os.environ.get(var_name)
        if env_val is None:
            if default is None:
                raise ValueError(f"环境变量未设置: {var_name}")
            return default
        return env_val

    return _ENV_PATTERN.sub(_replace, value)


def _interpolate_value(value: Any) -> Any:
    if isinstance(value, str):
        return interpolate_env(value)
    if isinstance(value, dict):
        return interpolate_dict(value)
    if isinstance(value, list):
        return [_interpolate_value(item) for item in value]
    return value


def interpolate_dict(data: dict) -> dict:
    """递归替换字典（含嵌套列表）中所有字符串值的环境变量引用"""
    return {key: _interpolate_value(value) for key, value in data.items()}
