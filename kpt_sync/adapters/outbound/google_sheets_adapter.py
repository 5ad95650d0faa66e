import logging

from google.auth.credentials import Credentials
from googleapiclient.discovery import Resource, build

from kpt_sync.adapters.outbound.google_api import execute_request
from kpt_sync.domain.report import SpreadsheetDocument

logger = logging.getLogger(__name__)


class GoogleSheetsAdapter:
    """Google Sheets v4 API 와 통신하는 Outbound Adapter"""

    def __init__(self, service: Resource):
        self._service = service

    @classmethod
    def from_credentials(cls, credentials: Credentials) -> "GoogleSheetsAdapter":
        service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        return cls(service)

    async def open_by_id(self, spreadsheet_id: str) -> SpreadsheetDocument:
        """스프레드시트의 id/이름/URL 을 조회합니다."""
        logger.info("🌐 스프레드시트 조회: id=%s", spreadsheet_id)
        data = await execute_request(
            self._service.spreadsheets().get(
                spreadsheetId=spreadsheet_id,
                fields="spreadsheetId,properties.title,spreadsheetUrl",
            )
        )
        return SpreadsheetDocument(
            id=data.get("spreadsheetId", spreadsheet_id),
            name=data.get("properties", {}).get("title", ""),
            url=data.get("spreadsheetUrl", ""),
        )

    async def set_cell_values(self, spreadsheet_id: str, values: dict[str, str]) -> None:
        """
        셀 주소별 값을 한 번의 batchUpdate 로 덮어씁니다.

        시트 이름 없는 주소(예: "B8")는 첫 번째 시트를 가리킵니다.
        값은 RAW 로 기록되어 수식으로 해석되지 않습니다.
        """
        body = {
            "valueInputOption": "RAW",
            "data": [
                {"range": address, "values": [[value]]}
                for address, value in values.items()
            ],
        }
        logger.info("🌐 셀 갱신 요청: id=%s, %d셀", spreadsheet_id, len(values))
        response = await execute_request(
            self._service.spreadsheets().values().batchUpdate(
                spreadsheetId=spreadsheet_id,
                body=body,
            )
        )
        logger.info("✅ 셀 갱신 완료: %d셀", response.get("totalUpdatedCells", 0))
