import logging

from kpt_sync.application.ports.spreadsheet_port import SpreadsheetPort
from kpt_sync.domain.kpt import KPTContents
from kpt_sync.domain.report import KPT_CELL_ADDRESSES, SpreadsheetDocument, UpdateResult

logger = logging.getLogger(__name__)


class OverwriteKPTContentsUseCase:
    """KPT 섹션을 월보 스프레드시트의 고정 셀에 덮어쓰는 Use Case"""

    def __init__(self, spreadsheet_port: SpreadsheetPort):
        self.spreadsheet_port = spreadsheet_port

    async def execute(
        self,
        kpt: KPTContents,
        spreadsheet: SpreadsheetDocument,
    ) -> UpdateResult:
        values = {
            address: kpt.get(kind)
            for kind, address in KPT_CELL_ADDRESSES.items()
        }
        logger.info(
            "✏️ 월보 셀 갱신: [%s] %s (%s)",
            spreadsheet.id, spreadsheet.name, ", ".join(values),
        )

        await self.spreadsheet_port.set_cell_values(spreadsheet.id, values)

        return UpdateResult(succeed=True, kpt=kpt, spreadsheet=spreadsheet)
