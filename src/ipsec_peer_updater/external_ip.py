"""
외부 IP 조회 모듈
공개 IP 에코 서비스에 HTTP GET 요청 후 응답 본문을 그대로 반환
"""

import requests
from typing import Optional

from .config import DEFAULT_EXTERNAL_IP_URL
from .exceptions import ExternalIPError
from .logger import get_logger


class ExternalIPResolver:
    """외부(공인) IP 조회 클래스"""

    def __init__(self, url: str = DEFAULT_EXTERNAL_IP_URL, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session
        self.logger = get_logger()

    def resolve(self) -> str:
        """외부 IP 조회

        응답 본문은 공백 제거나 형식 검증 없이 그대로 반환한다.

        Raises:
            ExternalIPError: 연결 실패, 타임아웃, 2xx 이외의 응답
        """
        self.logger.debug(f"Requesting external ip from {self.url} (timeout={self.timeout}s)...")
        http = self.session or requests
        try:
            response = http.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise ExternalIPError(
                f"external ip service {self.url} returned HTTP {e.response.status_code}"
            ) from e
        except requests.exceptions.Timeout as e:
            raise ExternalIPError(
                f"timeout after {self.timeout}s while requesting {self.url}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise ExternalIPError(f"cannot request external ip from {self.url}: {e}") from e

        return response.text
