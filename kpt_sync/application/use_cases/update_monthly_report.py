import asyncio
import logging
from datetime import datetime

from kpt_sync.application.use_cases.fetch_kpt_contents import FetchKPTContentsUseCase
from kpt_sync.application.use_cases.locate_monthly_report import LocateMonthlyReportUseCase
from kpt_sync.application.use_cases.overwrite_kpt_contents import OverwriteKPTContentsUseCase
from kpt_sync.domain.report import UpdateResult

logger = logging.getLogger(__name__)


class UpdateMonthlyReportUseCase:
    """
    월보 갱신 전체 흐름.

    1. 기준 시각을 한 번만 결정
    2. 페이지 조회와 스프레드시트 탐색을 동시에 실행
    3. 두 결과가 모두 준비되면 셀을 덮어씀

    어느 단계든 실패하면 예외가 그대로 전파되고, 셀 쓰기는 실행되지 않습니다.
    """

    def __init__(
        self,
        fetch_kpt_contents: FetchKPTContentsUseCase,
        locate_monthly_report: LocateMonthlyReportUseCase,
        overwrite_kpt_contents: OverwriteKPTContentsUseCase,
    ):
        self._fetch = fetch_kpt_contents
        self._locate = locate_monthly_report
        self._overwrite = overwrite_kpt_contents

    async def execute(self, now: datetime | None = None) -> UpdateResult:
        today = now or datetime.now()
        logger.info("🔄 월보 갱신 시작: 기준 시각=%s", today.isoformat(timespec="seconds"))

        kpt, spreadsheet = await asyncio.gather(
            self._fetch.execute(today),
            self._locate.execute(today),
        )

        result = await self._overwrite.execute(kpt, spreadsheet)
        logger.info("✅ 월보 갱신 완료: %s", spreadsheet.url)
        return result
