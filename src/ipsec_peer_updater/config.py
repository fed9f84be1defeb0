"""
설정 관리 모듈
YAML/JSON 기반 설정 파일 관리 및 기본값 제공
"""

import os
import yaml
import json
from typing import Dict, Any, Optional
from dataclasses import dataclass, asdict

from .exceptions import ConfigError

DEFAULT_EXTERNAL_IP_URL = "https://myexternalip.com/raw"
DEFAULT_REGION = "eu-de"


@dataclass
class ConnectionConfig:
    """IPsec 연결 설정"""
    id: str = ""
    region: str = DEFAULT_REGION


@dataclass
class ExternalIPConfig:
    """외부 IP 조회 설정"""
    url: str = DEFAULT_EXTERNAL_IP_URL
    timeout: float = 10.0


@dataclass
class CloudConfig:
    """클라우드 API 설정"""
    cloud_name: str = ""  # clouds.yaml 이름, 비우면 OS_* 환경변수 사용
    api_timeout: float = 30.0


@dataclass
class LoggingConfig:
    """로깅 설정"""
    log_dir: str = ""  # 비우면 파일 로깅 안 함
    log_level: str = "INFO"


class Config:
    """전체 설정 관리 클래스"""

    DEFAULT_CONFIG_PATHS = [
        "/etc/ipsec-peer-updater/config.yaml",
        "~/.ipsec-peer-updater/config.yaml",
        "./config.yaml",
    ]

    SECTIONS = ("connection", "external_ip", "cloud", "logging")

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self.connection = ConnectionConfig()
        self.external_ip = ExternalIPConfig()
        self.cloud = CloudConfig()
        self.logging = LoggingConfig()

        if config_path:
            self.load(config_path)
        else:
            self._load_from_default_paths()

    def _load_from_default_paths(self):
        """기본 경로에서 설정 파일 로드"""
        for path in self.DEFAULT_CONFIG_PATHS:
            expanded_path = os.path.expanduser(path)
            if os.path.exists(expanded_path):
                self.load(expanded_path)
                return

    def load(self, path: str):
        """설정 파일 로드"""
        path = os.path.expanduser(path)
        if not os.path.exists(path):
            raise ConfigError(f"config file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                if path.endswith('.json'):
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f) or {}
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigError(f"cannot read config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"config file {path} must contain a mapping")

        self._update_from_dict(data, path)
        self.config_path = path

    def _update_from_dict(self, data: Dict[str, Any], path: str = ""):
        """딕셔너리에서 설정 업데이트"""
        for section_name in self.SECTIONS:
            values = data.get(section_name) or {}
            if not isinstance(values, dict):
                raise ConfigError(f"section {section_name} in {path} must be a mapping")
            section = getattr(self, section_name)
            for key, value in values.items():
                if hasattr(section, key):
                    setattr(section, key, value)

    def apply_overrides(self, **overrides):
        """CLI 옵션 적용 (None 값은 무시)

        키는 ``섹션__필드`` 형식. 예: ``connection__region="eu-nl"``
        """
        for key, value in overrides.items():
            if value is None:
                continue
            section_name, field_name = key.split("__", 1)
            setattr(getattr(self, section_name), field_name, value)

    def validate(self):
        """필수 값 확인, 네트워크 호출 전에 실행"""
        if not self.connection.id or not str(self.connection.id).strip():
            raise ConfigError(
                "no valid ipsec connection id; use argument \"--help\" to see usage"
            )
        if not self.connection.region:
            raise ConfigError("region must not be empty")
        if not self.external_ip.url:
            raise ConfigError("external ip url must not be empty")
        for name, value in (("external ip timeout", self.external_ip.timeout),
                            ("api timeout", self.cloud.api_timeout)):
            try:
                positive = float(value) > 0
            except (TypeError, ValueError):
                positive = False
            if not positive:
                raise ConfigError(f"{name} must be a positive number, got {value!r}")

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {name: asdict(getattr(self, name)) for name in self.SECTIONS}
