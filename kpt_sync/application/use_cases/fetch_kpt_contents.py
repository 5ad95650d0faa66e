import logging
from datetime import datetime

from kpt_sync.application.ports.page_port import PagePort
from kpt_sync.domain.kpt import KPTContents, parse_kpt_contents
from kpt_sync.domain.report import CalendarMonthKey

logger = logging.getLogger(__name__)


class FetchKPTContentsUseCase:
    """해당 월의 월보 페이지를 조회하여 KPT 섹션을 추출하는 Use Case"""

    def __init__(self, page_port: PagePort, project_name: str):
        self.page_port = page_port
        self.project_name = project_name

    async def execute(self, tod: datetime) -> KPTContents:
        key = CalendarMonthKey.from_datetime(tod)
        logger.info("📄 월보 페이지 조회 시작: %s/%s", self.project_name, key.report_name)

        text = await self.page_port.get_page_text(self.project_name, key.report_name)
        kpt = parse_kpt_contents(text)

        logger.info(
            "KPT 추출 완료: %s",
            ", ".join(f"{kind}={len(value)}자" for kind, value in kpt.as_dict().items()),
        )
        return kpt
