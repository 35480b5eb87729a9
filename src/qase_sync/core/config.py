"""全局配置加载

加载 .env → qase-sync.yaml（可选）→ 环境变量插值 → 环境变量覆盖 → Pydantic 校验 → SyncConfig。
"""

import os
from pathlib import Path

from pydantic import ValidationError

from qase_sync.core.exceptions import ConfigError
from qase_sync.schema.config import SyncConfig
from qase_sync.utils.template import interpolate_dict
from qase_sync.utils.yaml_loader import load_yaml

DEFAULT_CONFIG_PATH = "./qase-sync.yaml"

# 环境变量 → 配置字段路径
ENV_BINDINGS: dict[str, tuple[str, str]] = {
    "QASE_API_TOKEN": ("qase", "api_token"),
    "QASE_PROJECT_CODE": ("qase", "project_code"),
    "QASE_API_BASE": ("qase", "api_base"),
    "QASE_SUBMIT_MODE": ("qase", "submit_mode"),
    "QASE_TIMEOUT": ("qase", "timeout"),
    "POSTMAN_JSON_REPORT": ("report", "path"),
    "QASE_TEST_RUN_TAG": ("run", "title"),
    "QASE_MATCH_STRATEGY": ("matching", "strategy"),
}

REQUIRED_ENV = ("QASE_API_TOKEN", "QASE_PROJECT_CODE")


def load_dotenv(env_path: str | Path | None = None) -> None:
    """加载 .env 文件中的环境变量（不覆盖已有值）"""
    if env_path is None:
        env_path = Path.cwd() / ".env"
    path = Path(env_path)
    if not path.exists():
        return
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip().strip("\"'")
            # 不覆盖已存在的环境变量
            if key not in os.environ:
                os.environ[key] = value


def apply_env_overrides(raw: dict) -> dict:
    """用环境变量覆盖配置字段，空字符串视为未设置"""
    merged = {key: dict(value) if isinstance(value, dict) else value for key, value in raw.items()}
    for env_name, (section, key) in ENV_BINDINGS.items():
        value = os.environ.get(env_name)
        if not value:
            continue
        if not isinstance(merged.get(section), dict):
            merged[section] = {}
        merged[section][key] = value
    return merged


def load_config(config_path: str | Path = DEFAULT_CONFIG_PATH) -> SyncConfig:
    """加载并校验全局配置，配置文件不存在时仅使用环境变量"""
    path = Path(config_path)
    base_dir = path.resolve().parent

    # 自动加载配置文件同目录下的 .env 文件
    load_dotenv(base_dir / ".env")

    raw = load_yaml(path) if path.exists() else {}

    try:
        interpolated = interpolate_dict(raw)
    except ValueError as e:
        raise ConfigError(f"环境变量插值失败: {e}") from e

    merged = apply_env_overrides(interpolated)
    qase_section = merged.get("qase") if isinstance(merged.get("qase"), dict) else {}
    if not qase_section.get("api_token") or not qase_section.get("project_code"):
        raise ConfigError(f"缺少 {' 或 '.join(REQUIRED_ENV)}（环境变量或配置文件 qase 段）")

    merged.setdefault("base_dir", base_dir)
    try:
        return SyncConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"配置校验失败: {e}") from e
