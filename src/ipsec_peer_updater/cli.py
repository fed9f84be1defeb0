"""
CLI 메인 인터페이스
Click 및 Rich 기반, 스케줄러에서 주기적으로 실행하는 단일 명령
"""

import socket
import sys
import click
from rich.console import Console

from . import __version__
from .cloud import CloudClient
from .config import Config, DEFAULT_REGION
from .exceptions import UpdaterError, EXIT_FAILURE
from .external_ip import ExternalIPResolver
from .logger import init_logger, get_logger
from .updater import PeerAddressUpdater, UpdateResult

console = Console()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def run(cfg: Config, dry_run: bool = False) -> UpdateResult:
    """검증된 설정으로 한 번 실행"""
    cloud = CloudClient.from_env(
        region=cfg.connection.region,
        cloud_name=cfg.cloud.cloud_name,
        api_timeout=float(cfg.cloud.api_timeout),
    )
    resolver = ExternalIPResolver(cfg.external_ip.url, float(cfg.external_ip.timeout))
    updater = PeerAddressUpdater(cloud, resolver, dry_run=dry_run)
    return updater.run(cfg.connection.id, cfg.connection.region)


def show_summary(result: UpdateResult):
    """실행 결과 요약 표시"""
    if not result.changed:
        console.print(f"[green]✓ peer 주소 변경 없음[/green] ({result.previous_peer_address})")
    elif result.dry_run:
        console.print(
            f"[yellow]dry run: {result.previous_peer_address} → {result.external_ip}[/yellow]"
        )
    else:
        console.print(
            f"[bold green]✓ peer 주소 업데이트 완료[/bold green] "
            f"{result.previous_peer_address} → {result.external_ip}"
        )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option('--ipsec-connection-id', envvar='IPSEC_CONNECTION_ID',
              help='IPsec site-to-site 연결 ID (필수, 공백만 있는 값은 거부)')
@click.option('--region', help=f'클라우드 리전 (기본값: {DEFAULT_REGION})')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='설정 파일 경로')
@click.option('--external-ip-url', help='외부 IP 에코 서비스 URL')
@click.option('--timeout', type=float, help='외부 IP 조회 타임아웃 (초)')
@click.option('--api-timeout', type=float, help='클라우드 API 타임아웃 (초)')
@click.option('--cloud', 'cloud_name', help='clouds.yaml 클라우드 이름 (기본값: OS_* 환경변수)')
@click.option('--dry-run', is_flag=True, help='비교만 하고 업데이트하지 않음')
@click.option('--debug', is_flag=True, help='디버그 모드')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help='로그 레벨 (기본값: INFO)')
@click.option('--log-dir', type=click.Path(file_okay=False), help='로그 파일 디렉토리')
def cli(ipsec_connection_id, region, config_path, external_ip_url, timeout, api_timeout,
        cloud_name, dry_run, debug, log_level, log_dir):
    """IPsec 연결의 peer 주소를 현재 외부 IP로 동기화합니다."""
    exit_code = 0
    try:
        cfg = Config(config_path)
        cfg.apply_overrides(
            connection__id=ipsec_connection_id,
            connection__region=region,
            external_ip__url=external_ip_url,
            external_ip__timeout=timeout,
            cloud__api_timeout=api_timeout,
            cloud__cloud_name=cloud_name,
            logging__log_level=log_level,
            logging__log_dir=log_dir,
        )
        logger = init_logger(cfg.logging.log_dir or None, cfg.logging.log_level, debug)
        logger.info(f"starting ipsec connection peer-address dynamic update from {socket.gethostname()}")
        if cfg.logging.log_dir:
            log_files = logger.get_log_files()
            logger.debug(f"log files: main={log_files['main_log']} error={log_files['error_log']}")

        cfg.validate()
        result = run(cfg, dry_run=dry_run)
        show_summary(result)

    except UpdaterError as e:
        get_logger().error(str(e))
        exit_code = e.exit_code

    except KeyboardInterrupt:
        get_logger().warning("Execution interrupted by user")
        exit_code = EXIT_FAILURE

    except Exception:
        get_logger().exception("Unexpected error occurred")
        exit_code = EXIT_FAILURE

    finally:
        logger = get_logger()
        logger.info("flush logs & exit...")
        logger.flush()

    sys.exit(exit_code)


def main():
    """메인 엔트리 포인트"""
    cli()


if __name__ == '__main__':
    main()
