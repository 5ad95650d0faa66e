import asyncio
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path

from kpt_sync.configuration.container import build_container
from kpt_sync.domain.errors import KPTSyncError
from kpt_sync.domain.report import UpdateResult


def setup_logging():
    """로깅 설정: stderr와 파일 두 곳에 로그 출력"""
    # 로그 디렉토리 생성
    log_dir = Path(__file__).parent.parent / "logs"
    log_dir.mkdir(exist_ok=True)

    # 로그 파일 경로
    log_file = log_dir / "kpt-sync.log"

    # 로그 포맷
    formatter = logging.Formatter(
        '%(asctime)s [%(name)s] %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    # 1. stderr 핸들러 (cron 실행 로그에 표시)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    root_logger.addHandler(stderr_handler)

    # 2. 파일 핸들러 (로그 파일에 저장, 최대 10MB, 5개 백업)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # googleapiclient 내부 로그는 경고 이상만
    logging.getLogger("googleapiclient").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logging.getLogger(__name__)


logger = setup_logging()


async def main() -> UpdateResult:
    try:
        logger.info("=" * 60)
        logger.info("월보 KPT 동기화 시작")

        container = build_container()
        logger.info("✅ Container 빌드 완료")
        logger.info("환경: %s", container.settings.app_env)
        logger.info("Scrapbox URL: %s", container.settings.scrapbox_base_url)
        logger.info("Scrapbox Project: %s", container.settings.scrapbox_project_name)
        logger.info("Drive Root Folder: %s", container.settings.gdrive_root_folder_id)

        result = await container.update_monthly_report_use_case.execute()

        logger.info("실행 결과: %s", json.dumps(result.as_dict(), ensure_ascii=False))
        logger.info("=" * 60)
        return result

    except Exception as e:
        logger.error("=" * 60)
        logger.error("월보 KPT 동기화 실패!")
        logger.error("오류 타입: %s", type(e).__name__)
        logger.error("오류 메시지: %s", e.message if isinstance(e, KPTSyncError) else str(e))
        if isinstance(e, KPTSyncError):
            logger.error("진단 정보: %s", e.to_json())
        logger.error("=" * 60)
        traceback.print_exc(file=sys.stderr)
        raise


def run() -> None:
    asyncio.run(main())
