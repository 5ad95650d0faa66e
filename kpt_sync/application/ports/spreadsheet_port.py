from typing import Protocol

from kpt_sync.domain.report import SpreadsheetDocument


class SpreadsheetPort(Protocol):
    """스프레드시트 서비스 계약"""

    async def open_by_id(self, spreadsheet_id: str) -> SpreadsheetDocument:
        """스프레드시트의 id/이름/URL 을 조회합니다."""
        ...

    async def set_cell_values(self, spreadsheet_id: str, values: dict[str, str]) -> None:
        """
        셀 주소별 값을 덮어씁니다.

        Args:
            values: {셀 주소: 값} 매핑 (예: {"B8": "..."})
        """
        ...
