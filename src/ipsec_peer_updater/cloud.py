"""
클라우드 네트워킹 API 모듈 (OpenStack / Open Telekom Cloud)
환경변수 기반 인증, IPsec site-to-site 연결 조회 및 peer 주소 업데이트
"""

import openstack
import openstack.connection
import openstack.exceptions
from keystoneauth1 import exceptions as ks_exceptions
from dataclasses import dataclass
from typing import Optional

from .exceptions import AuthenticationError, CloudAPIError
from .logger import get_logger

SDK_ERRORS = (openstack.exceptions.SDKException, ks_exceptions.ClientException)


@dataclass(frozen=True)
class VpnConnection:
    """IPsec 연결 조회 결과 (읽기 전용 스냅샷)"""
    id: str
    peer_address: str
    name: str = ""
    status: str = ""

    @classmethod
    def from_resource(cls, resource) -> "VpnConnection":
        return cls(
            id=resource.id,
            peer_address=resource.peer_address or "",
            name=resource.name or "",
            status=resource.status or "",
        )


class CloudClient:
    """인증된 클라우드 클라이언트

    프로세스 시작 시 한 번 생성하며, 리전별 네트워크 클라이언트는
    인증된 세션을 공유해서 호출마다 새로 얻는다.
    """

    def __init__(self, connection: openstack.connection.Connection):
        self.connection = connection
        self.logger = get_logger()

    @classmethod
    def from_env(cls, region: str, cloud_name: Optional[str] = None,
                 api_timeout: Optional[float] = None) -> "CloudClient":
        """환경변수(OS_*) 또는 clouds.yaml로 인증

        Raises:
            AuthenticationError: 인증 정보 누락 또는 인증 거부
        """
        logger = get_logger()
        logger.info("initializing openstack provider client")
        try:
            connection = openstack.connect(
                cloud=cloud_name or None,
                region_name=region,
                api_timeout=api_timeout,
            )
            connection.authorize()
        except SDK_ERRORS as e:
            raise AuthenticationError(f"openstack authentication failed: {e}") from e

        logger.info("initialized openstack provider client")
        return cls(connection)

    def network(self, region: str):
        """리전 범위의 네트워크 클라이언트"""
        try:
            regional = openstack.connection.Connection(
                session=self.connection.session,
                region_name=region,
            )
            return regional.network
        except SDK_ERRORS as e:
            raise CloudAPIError(f"cannot create network client for region {region}: {e}") from e

    def get_connection(self, connection_id: str, region: str) -> VpnConnection:
        """IPsec 연결 조회

        Raises:
            CloudAPIError: 존재하지 않는 ID, 권한 거부, 요청 제한, 통신 오류
        """
        network = self.network(region)
        self.logger.debug(f"Fetching ipsec connection {connection_id} in {region}...")
        try:
            resource = network.get_vpn_ipsec_site_connection(connection_id)
        except openstack.exceptions.NotFoundException as e:
            raise CloudAPIError(
                f"ipsec connection {connection_id} not found in region {region}"
            ) from e
        except SDK_ERRORS as e:
            raise CloudAPIError(f"cannot get ipsec connection {connection_id}: {e}") from e

        connection = VpnConnection.from_resource(resource)
        self.logger.debug(f"ipsec connection {connection.id}: name={connection.name} status={connection.status}")
        return connection

    def update_peer_address(self, connection_id: str, peer_address: str, region: str) -> VpnConnection:
        """peer 주소만 변경 (사전 조건 확인 없음)"""
        network = self.network(region)
        try:
            resource = network.update_vpn_ipsec_site_connection(
                connection_id, peer_address=peer_address
            )
        except SDK_ERRORS as e:
            raise CloudAPIError(
                f"cannot update peer address of ipsec connection {connection_id}: {e}"
            ) from e

        return VpnConnection.from_resource(resource)
