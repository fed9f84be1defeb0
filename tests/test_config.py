"""
설정 관리 모듈 테스트
"""

import json
import pytest
from ipsec_peer_updater.config import Config
from ipsec_peer_updater.exceptions import ConfigError


def test_default_config():
    """기본 설정 테스트"""
    config = Config()
    assert config.connection.id == ""
    assert config.connection.region == "eu-de"
    assert config.external_ip.url == "https://myexternalip.com/raw"
    assert config.external_ip.timeout > 0


def test_config_load_yaml(tmp_path):
    """YAML 설정 파일 로드 테스트"""
    path = tmp_path / "updater.yaml"
    path.write_text(
        """
connection:
  id: "4f1c-conn"
  region: "eu-nl"

external_ip:
  timeout: 3
  unknown_key: ignored
""",
        encoding="utf-8",
    )

    config = Config(str(path))
    assert config.connection.id == "4f1c-conn"
    assert config.connection.region == "eu-nl"
    assert config.external_ip.timeout == 3
    assert not hasattr(config.external_ip, "unknown_key")


def test_config_load_json(tmp_path):
    """JSON 설정 파일 로드 테스트"""
    path = tmp_path / "updater.json"
    path.write_text(json.dumps({"cloud": {"cloud_name": "otc"}}), encoding="utf-8")

    config = Config(str(path))
    assert config.cloud.cloud_name == "otc"


def test_config_default_path(tmp_path):
    """기본 경로의 설정 파일 자동 로드"""
    (tmp_path / "config.yaml").write_text("connection:\n  id: from-default\n", encoding="utf-8")

    config = Config()
    assert config.connection.id == "from-default"


def test_config_missing_file():
    """없는 설정 파일"""
    with pytest.raises(ConfigError):
        Config("/nonexistent/updater.yaml")


def test_config_invalid_yaml(tmp_path):
    """잘못된 YAML"""
    path = tmp_path / "broken.yaml"
    path.write_text("connection: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigError):
        Config(str(path))


def test_apply_overrides():
    """CLI 옵션이 설정 파일 값을 덮어씀, None 은 무시"""
    config = Config()
    config.connection.region = "eu-nl"
    config.apply_overrides(connection__id="conn-1", connection__region=None, external_ip__timeout=4.5)

    assert config.connection.id == "conn-1"
    assert config.connection.region == "eu-nl"
    assert config.external_ip.timeout == 4.5


@pytest.mark.parametrize("connection_id", ["", "   "])
def test_validate_empty_connection_id(connection_id):
    """빈 연결 ID는 설정 오류"""
    config = Config()
    config.connection.id = connection_id

    with pytest.raises(ConfigError):
        config.validate()


def test_validate_timeout():
    """타임아웃은 양수"""
    config = Config()
    config.connection.id = "conn-1"
    config.cloud.api_timeout = 0

    with pytest.raises(ConfigError):
        config.validate()


def test_config_to_dict():
    """딕셔너리 변환 테스트"""
    data = Config().to_dict()

    assert set(data) == {"connection", "external_ip", "cloud", "logging"}
    assert data["connection"]["region"] == "eu-de"


def test_config_section_not_mapping(tmp_path):
    """섹션 값이 매핑이 아니면 설정 오류"""
    path = tmp_path / "flat.yaml"
    path.write_text("connection: conn-1\n", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        Config(str(path))

    assert "connection" in str(excinfo.value)
