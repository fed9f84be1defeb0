"""
IPsec Peer Updater
동적 IP 환경의 호스트에서 클라우드 IPsec site-to-site VPN 연결의 peer 주소를 동기화하는 도구

Features:
- 외부(공인) IP 자동 조회
- OpenStack 환경변수 기반 인증 (Open Telekom Cloud 기본)
- 변경 시에만 peer 주소 업데이트
- 스케줄러(cron, systemd timer) 주기 실행용 단일 실행 구조
"""

__version__ = "1.0.0"
__author__ = "DevOps Team"
