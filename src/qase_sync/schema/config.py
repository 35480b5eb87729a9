"""全局配置 Pydantic 模型

对应 qase-sync.yaml 配置文件，环境变量可覆盖其中任意字段。
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class QaseConfig(BaseModel):
    """Qase 连接配置"""

    api_base: str = "https://api.qase.io"
    api_token: str = Field(min_length=1)
    project_code: str = Field(min_length=1)
    # per_case: v1 逐条提交；batch: v2 批量提交
    submit_mode: Literal["per_case", "batch"] = "batch"
    timeout: float = Field(default=30.0, gt=0)


class RunConfig(BaseModel):
    """测试运行设置"""

    # 支持 {timestamp} 占位符
    title: str = "Local Run"


class ReportConfig(BaseModel):
    """Postman 报告输入设置"""

    path: str = "results.json"


class MatchingConfig(BaseModel):
    """断言与步骤的匹配策略"""

    strategy: Literal["exact", "normalized"] = "exact"


class SyncConfig(BaseModel):
    """qase-sync 全局配置根模型"""

    qase: QaseConfig
    run: RunConfig = Field(default_factory=RunConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    base_dir: Path = Field(default_factory=Path.cwd)

    def report_path(self) -> Path:
        """报告路径，相对路径基于 base_dir 解析"""
        path = Path(self.report.path)
        if path.is_absolute():
            return path
        return self.base_dir / path
