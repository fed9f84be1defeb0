"""
테스트 공통 fixture
네트워크 호출 없이 클라우드 클라이언트와 외부 IP 조회기를 대체
"""

import pytest
from ipsec_peer_updater.cloud import VpnConnection


class FakeResolver:
    """호출 기록용 외부 IP 조회기"""

    def __init__(self, ip="203.0.113.9", error=None):
        self.ip = ip
        self.error = error
        self.calls = 0

    def resolve(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.ip


class FakeCloud:
    """호출 기록용 클라우드 클라이언트"""

    def __init__(self, peer_address="198.51.100.2", get_error=None, update_error=None):
        self.peer_address = peer_address
        self.get_error = get_error
        self.update_error = update_error
        self.get_calls = []
        self.update_calls = []

    def get_connection(self, connection_id, region):
        self.get_calls.append((connection_id, region))
        if self.get_error:
            raise self.get_error
        return VpnConnection(id=connection_id, peer_address=self.peer_address)

    def update_peer_address(self, connection_id, peer_address, region):
        self.update_calls.append((connection_id, peer_address, region))
        if self.update_error:
            raise self.update_error
        self.peer_address = peer_address
        return VpnConnection(id=connection_id, peer_address=peer_address)


@pytest.fixture
def fake_resolver():
    return FakeResolver()


@pytest.fixture
def fake_cloud():
    return FakeCloud()


@pytest.fixture(autouse=True)
def no_config_file(monkeypatch, tmp_path):
    """기본 경로의 설정 파일이 테스트에 영향을 주지 않도록 격리"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("IPSEC_CONNECTION_ID", raising=False)
    monkeypatch.setattr(
        "ipsec_peer_updater.config.Config.DEFAULT_CONFIG_PATHS",
        [str(tmp_path / "config.yaml")],
    )
