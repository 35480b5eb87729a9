"""安全 YAML 加载"""

from pathlib import Path

import yaml

from qase_sync.core.exceptions import ConfigError


def load_yaml(path: str | Path) -> dict:
    """安全加载 YAML 配置文件，返回字典（空文件视为空配置）"""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"配置文件不存在: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML 解析失败 ({path}): {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"YAML 顶层必须是字典: {path}")
    return data
