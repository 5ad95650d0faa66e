from typing import Protocol

from kpt_sync.domain.report import DriveFile, DriveFolder


class StoragePort(Protocol):
    """계층형 파일 저장소 계약 (읽기 전용)"""

    async def get_folder(self, folder_id: str) -> DriveFolder:
        """ID로 폴더를 조회합니다."""
        ...

    async def list_child_folders(self, folder_id: str) -> list[DriveFolder]:
        """하위 폴더 목록을 목록 순서대로 반환합니다."""
        ...

    async def list_files_by_name(self, folder_id: str, name: str) -> list[DriveFile]:
        """폴더 안에서 이름이 정확히 일치하는 파일 목록을 목록 순서대로 반환합니다."""
        ...
