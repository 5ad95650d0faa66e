import asyncio
import logging

import google.auth
from google.auth.credentials import Credentials
from google.oauth2 import service_account
from googleapiclient.errors import HttpError

logger = logging.getLogger(__name__)

# Drive 는 탐색만, Sheets 는 셀 쓰기
SCOPES = [
    "https://www.googleapis.com/auth/drive.readonly",
    "https://www.googleapis.com/auth/spreadsheets",
]


def load_google_credentials(service_account_file: str = "") -> Credentials:
    """
    Google API 인증 정보를 로드합니다.

    service_account_file 이 지정되면 서비스 계정 키 파일을,
    없으면 Application Default Credentials 를 사용합니다.
    """
    if service_account_file:
        logger.info("서비스 계정 키 사용: %s", service_account_file)
        return service_account.Credentials.from_service_account_file(
            service_account_file, scopes=SCOPES,
        )

    logger.info("Application Default Credentials 사용")
    credentials, _project = google.auth.default(scopes=SCOPES)
    return credentials


async def execute_request(request) -> dict:
    """
    googleapiclient 요청을 기본 스레드 풀에서 실행합니다.

    클라이언트 라이브러리가 동기 방식이므로 이벤트 루프를 막지 않도록 분리합니다.

    Raises:
        HttpError: API 오류 응답 (로그를 남기고 그대로 전파)
    """
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(None, request.execute)
    except HttpError as e:
        logger.error("❌ Google API 오류: %d - %s", e.resp.status, str(e)[:200])
        raise
