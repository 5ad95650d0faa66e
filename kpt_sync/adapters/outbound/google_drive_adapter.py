import logging
from typing import Any

from google.auth.credentials import Credentials
from googleapiclient.discovery import Resource, build

from kpt_sync.adapters.outbound.google_api import execute_request
from kpt_sync.domain.report import DriveFile, DriveFolder

logger = logging.getLogger(__name__)

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"


def _quote(value: str) -> str:
    """Drive 검색 쿼리의 문자열 리터럴로 변환합니다."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


class GoogleDriveAdapter:
    """Google Drive v3 API 로 폴더/파일을 탐색하는 Outbound Adapter (읽기 전용)"""

    def __init__(self, service: Resource, page_size: int = 100):
        self._service = service
        self.page_size = page_size

    @classmethod
    def from_credentials(cls, credentials: Credentials) -> "GoogleDriveAdapter":
        service = build("drive", "v3", credentials=credentials, cache_discovery=False)
        return cls(service)

    async def get_folder(self, folder_id: str) -> DriveFolder:
        """ID로 폴더를 조회합니다."""
        logger.info("🌐 Drive 폴더 조회: folder_id=%s", folder_id)
        data = await execute_request(
            self._service.files().get(
                fileId=folder_id,
                fields="id, name",
                supportsAllDrives=True,
            )
        )
        return DriveFolder(id=data.get("id", folder_id), name=data.get("name", ""))

    async def list_child_folders(self, folder_id: str) -> list[DriveFolder]:
        """하위 폴더 목록을 목록 순서대로 반환합니다."""
        query = " and ".join([
            f"{_quote(folder_id)} in parents",
            f"mimeType = {_quote(FOLDER_MIME_TYPE)}",
            "trashed = false",
        ])
        files = await self._list_files(query)
        folders = [DriveFolder(id=f["id"], name=f.get("name", "")) for f in files]
        logger.info("하위 폴더 조회 완료: folder_id=%s, %d건", folder_id, len(folders))
        return folders

    async def list_files_by_name(self, folder_id: str, name: str) -> list[DriveFile]:
        """폴더 안에서 이름이 정확히 일치하는 파일 목록을 반환합니다. 폴더는 제외합니다."""
        query = " and ".join([
            f"{_quote(folder_id)} in parents",
            f"name = {_quote(name)}",
            f"mimeType != {_quote(FOLDER_MIME_TYPE)}",
            "trashed = false",
        ])
        files = await self._list_files(query)
        result = [
            DriveFile(id=f["id"], name=f.get("name", ""), mime_type=f.get("mimeType", ""))
            for f in files
        ]
        logger.info("파일 검색 완료: name=%s, %d건", name, len(result))
        return result

    async def _list_files(self, query: str) -> list[dict[str, Any]]:
        """검색 결과를 모든 페이지에 걸쳐 모아 반환합니다."""
        files: list[dict[str, Any]] = []
        page_token = None
        while True:
            response = await execute_request(
                self._service.files().list(
                    q=query,
                    pageSize=self.page_size,
                    pageToken=page_token,
                    fields="nextPageToken, files(id, name, mimeType)",
                    supportsAllDrives=True,
                    includeItemsFromAllDrives=True,
                )
            )
            files.extend(response.get("files", []))

            page_token = response.get("nextPageToken")
            if not page_token:
                break
        return files
