from typing import Protocol


class PagePort(Protocol):
    """Scrapbox 페이지 서비스 계약 (Port)"""

    async def get_page_text(self, project_name: str, page_title: str) -> str:
        """
        페이지 본문을 텍스트로 조회합니다.

        Raises:
            FetchError: 200 이외의 응답 또는 전송 오류
        """
        ...
