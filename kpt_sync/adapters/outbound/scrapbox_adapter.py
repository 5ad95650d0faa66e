import logging

import httpx

from kpt_sync.domain.errors import FetchError
from kpt_sync.domain.paths import join_paths

logger = logging.getLogger(__name__)


class ScrapboxAdapter:
    """Scrapbox REST API와 통신하는 Outbound Adapter"""

    def __init__(
        self,
        base_url: str,
        sid: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.sid = sid
        self.timeout = timeout
        self._transport = transport

    async def get_page_text(self, project_name: str, page_title: str) -> str:
        """페이지 본문을 텍스트로 조회합니다."""
        url = join_paths([self.base_url, "pages", project_name, page_title, "text"])
        logger.info("🌐 Scrapbox 페이지 조회: project=%s, title=%s", project_name, page_title)

        response = await self._request("GET", url)

        logger.info("✅ 페이지 조회 완료: %d자", len(response.text))
        return response.text

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """
        세션 쿠키를 붙여 요청하고, 200 응답만 반환합니다.

        Raises:
            FetchError: 200 이외의 응답 (헤더/본문/상태 코드 포함) 또는 전송 오류
        """
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.request(
                    method,
                    url,
                    headers={"Cookie": f"connect.sid={self.sid}"},
                    timeout=self.timeout,
                    **kwargs,
                )
        except httpx.TransportError as e:
            logger.error("❌ 네트워크 오류: %s", str(e))
            raise FetchError(None, contents=str(e), url=url) from e

        logger.info("HTTP Status: %d", response.status_code)
        if response.status_code != 200:
            logger.error("❌ HTTP 오류: %d - %s", response.status_code, response.text[:200])
            raise FetchError(
                response.status_code,
                headers=dict(response.headers),
                contents=response.text,
                url=url,
            )
        return response
