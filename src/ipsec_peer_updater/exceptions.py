"""
예외 정의
모든 치명적 오류는 UpdaterError 하위 클래스로 전파되어 CLI에서 한 번에 처리됨
"""

EXIT_FAILURE = 10


class UpdaterError(Exception):
    """업데이터 기본 예외"""

    exit_code = EXIT_FAILURE


class ConfigError(UpdaterError):
    """설정 오류 (연결 ID 누락, 설정 파일 오류 등)"""


class AuthenticationError(UpdaterError):
    """클라우드 인증 오류"""


class ExternalIPError(UpdaterError):
    """외부 IP 조회 오류"""


class CloudAPIError(UpdaterError):
    """클라우드 네트워킹 API 호출 오류"""
