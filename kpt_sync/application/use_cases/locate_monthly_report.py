import logging
from datetime import datetime

from kpt_sync.application.ports.spreadsheet_port import SpreadsheetPort
from kpt_sync.application.ports.storage_port import StoragePort
from kpt_sync.domain.errors import FolderNotFoundError, SpreadsheetNotFoundError
from kpt_sync.domain.report import CalendarMonthKey, DriveFolder, SpreadsheetDocument

logger = logging.getLogger(__name__)


class LocateMonthlyReportUseCase:
    """
    해당 월의 월보 스프레드시트를 찾는 Use Case.

    루트 폴더에서 月次資料/<연>/<월> 순서로 내려간 뒤,
    그 폴더에서 이름이 일치하는 첫 번째 파일을 스프레드시트로 엽니다.
    저장소 구조는 읽기만 하며, 없는 폴더를 만들지 않습니다.
    """

    def __init__(
        self,
        storage_port: StoragePort,
        spreadsheet_port: SpreadsheetPort,
        root_folder_id: str,
    ):
        self.storage_port = storage_port
        self.spreadsheet_port = spreadsheet_port
        self.root_folder_id = root_folder_id

    async def execute(self, tod: datetime) -> SpreadsheetDocument:
        location = CalendarMonthKey.from_datetime(tod).storage_location()
        logger.info(
            "📁 월보 스프레드시트 탐색 시작: %s/%s",
            "/".join(location.pathnames), location.name,
        )

        folder = await self.find_folder_by_pathnames(list(location.pathnames))
        return await self.find_spreadsheet_by_name(location.name, folder)

    async def find_folder_by_pathnames(self, pathnames: list[str]) -> DriveFolder:
        """
        루트 폴더부터 경로 세그먼트를 차례로 따라 내려갑니다.

        각 단계에서 이름이 정확히 일치하는 첫 번째 하위 폴더를 선택합니다.

        Raises:
            FolderNotFoundError: 일치하는 하위 폴더가 없는 세그먼트가 있을 때
                (전체 경로와 루트 폴더 ID 포함)
        """
        folder = await self.storage_port.get_folder(self.root_folder_id)

        for pathname in pathnames:
            children = await self.storage_port.list_child_folders(folder.id)
            found = next((child for child in children if child.name == pathname), None)
            if found is None:
                logger.error(
                    "❌ 하위 폴더 없음: %s (parent=[%s] %s)", pathname, folder.id, folder.name,
                )
                raise FolderNotFoundError(pathnames, self.root_folder_id)
            logger.info("  - 폴더: [%s] %s", found.id, found.name)
            folder = found

        return folder

    async def find_spreadsheet_by_name(
        self,
        name: str,
        folder: DriveFolder,
    ) -> SpreadsheetDocument:
        """
        폴더 안에서 이름이 일치하는 첫 번째 파일을 스프레드시트로 엽니다.

        같은 이름의 파일이 여러 개면 목록 순서상 첫 번째를 사용합니다.

        Raises:
            SpreadsheetNotFoundError: 일치하는 파일이 없을 때
        """
        files = await self.storage_port.list_files_by_name(folder.id, name)
        if not files:
            logger.error("❌ 스프레드시트 없음: %s (folder=[%s] %s)", name, folder.id, folder.name)
            raise SpreadsheetNotFoundError(name, {"id": folder.id, "name": folder.name})

        if len(files) > 1:
            logger.warning("동일한 이름의 파일 %d건, 첫 번째 사용: %s", len(files), files[0].id)

        spreadsheet = await self.spreadsheet_port.open_by_id(files[0].id)
        logger.info("✅ 월보 스프레드시트 발견: [%s] %s", spreadsheet.id, spreadsheet.name)
        return spreadsheet
