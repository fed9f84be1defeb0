"""
peer 주소 동기화 모듈
외부 IP와 IPsec 연결의 peer 주소를 비교하고 다를 때만 업데이트
"""

from dataclasses import dataclass, asdict
from typing import Dict

from .logger import get_logger


@dataclass
class UpdateResult:
    """실행 결과"""
    connection_id: str
    region: str
    external_ip: str
    previous_peer_address: str
    changed: bool
    dry_run: bool = False

    def to_dict(self) -> Dict:
        return asdict(self)


class PeerAddressUpdater:
    """peer 주소 업데이터

    Args:
        cloud: get_connection / update_peer_address 를 제공하는 클라우드 클라이언트
        resolver: resolve() 를 제공하는 외부 IP 조회기
        dry_run: True 이면 비교만 하고 업데이트 호출은 하지 않음
    """

    def __init__(self, cloud, resolver, dry_run: bool = False):
        self.cloud = cloud
        self.resolver = resolver
        self.dry_run = dry_run
        self.logger = get_logger()

    def run(self, connection_id: str, region: str) -> UpdateResult:
        """외부 IP 조회 → 연결 조회 → 비교 → (변경 시) 업데이트

        각 단계의 예외는 그대로 전파된다.
        """
        external_ip = self.resolver.resolve()
        self.logger.info(f"current external ip: {external_ip}")

        connection = self.cloud.get_connection(connection_id, region)
        self.logger.info(f"current ipsec connection peer-address: {connection.peer_address}")

        result = UpdateResult(
            connection_id=connection_id,
            region=region,
            external_ip=external_ip,
            previous_peer_address=connection.peer_address,
            changed=connection.peer_address != external_ip,
            dry_run=self.dry_run,
        )

        if not result.changed:
            self.logger.info("skip update, no ip address change...")
            return result

        if self.dry_run:
            self.logger.warning(
                f"dry run: would update ipsec connection peer-address to {external_ip}"
            )
            return result

        self.logger.info(f"updating ipsec connection peer-address to {external_ip}...")
        self.cloud.update_peer_address(connection_id, external_ip, region)
        self.logger.info(f"updated ipsec connection peer-address to {external_ip}...")
        return result
