# Shared fakes for the outbound ports and the googleapiclient resources.
#
# Port fakes keep every call so tests can assert on what reached the
# external services (and what never did).

import pytest

from kpt_sync.configuration.settings import REQUIRED_VARS
from kpt_sync.domain.report import DriveFile, DriveFolder, SpreadsheetDocument


# --- Port fakes ----------------------------------------------------------------

class FakePagePort:
    def __init__(self, text: str = "", error: Exception | None = None):
        self._text = text
        self._error = error
        self.calls: list[tuple[str, str]] = []

    async def get_page_text(self, project_name: str, page_title: str) -> str:
        self.calls.append((project_name, page_title))
        if self._error is not None:
            raise self._error
        return self._text


class FakeStoragePort:
    """Folder tree held in memory: {folder_id: [child folders]} / {folder_id: [files]}."""

    def __init__(
        self,
        root: DriveFolder,
        children: dict[str, list[DriveFolder]] | None = None,
        files: dict[str, list[DriveFile]] | None = None,
    ):
        self._folders = {root.id: root}
        self._children = children or {}
        self._files = files or {}
        for folders in self._children.values():
            for folder in folders:
                self._folders[folder.id] = folder
        self.calls: list[tuple] = []

    async def get_folder(self, folder_id: str) -> DriveFolder:
        self.calls.append(("get_folder", folder_id))
        return self._folders[folder_id]

    async def list_child_folders(self, folder_id: str) -> list[DriveFolder]:
        self.calls.append(("list_child_folders", folder_id))
        return list(self._children.get(folder_id, []))

    async def list_files_by_name(self, folder_id: str, name: str) -> list[DriveFile]:
        self.calls.append(("list_files_by_name", folder_id, name))
        return [f for f in self._files.get(folder_id, []) if f.name == name]


class FakeSpreadsheetPort:
    def __init__(self, documents: dict[str, SpreadsheetDocument] | None = None):
        self._documents = documents or {}
        self.opened: list[str] = []
        self.writes: list[tuple[str, dict[str, str]]] = []

    async def open_by_id(self, spreadsheet_id: str) -> SpreadsheetDocument:
        self.opened.append(spreadsheet_id)
        return self._documents.get(
            spreadsheet_id,
            SpreadsheetDocument(
                id=spreadsheet_id,
                name=f"name-{spreadsheet_id}",
                url=f"https://docs.google.com/spreadsheets/d/{spreadsheet_id}/edit",
            ),
        )

    async def set_cell_values(self, spreadsheet_id: str, values: dict[str, str]) -> None:
        self.writes.append((spreadsheet_id, dict(values)))


# --- googleapiclient fakes -----------------------------------------------------

class FakeRequest:
    def __init__(self, result):
        self._result = result

    def execute(self):
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


class FakeFilesResource:
    def __init__(self, list_pages: list[dict] | None = None, get_result: dict | None = None):
        self._list_pages = list(list_pages or [])
        self._get_result = get_result or {}
        self.list_calls: list[dict] = []
        self.get_calls: list[dict] = []

    def list(self, **kwargs):
        self.list_calls.append(kwargs)
        return FakeRequest(self._list_pages.pop(0))

    def get(self, **kwargs):
        self.get_calls.append(kwargs)
        return FakeRequest(self._get_result)


class FakeDriveService:
    def __init__(self, files: FakeFilesResource):
        self._files = files

    def files(self):
        return self._files


class FakeValuesResource:
    def __init__(self, result):
        self._result = result
        self.batch_update_calls: list[dict] = []

    def batchUpdate(self, **kwargs):
        self.batch_update_calls.append(kwargs)
        return FakeRequest(self._result)


class FakeSpreadsheetsResource:
    def __init__(self, get_result: dict | None = None, update_result=None):
        self._get_result = get_result or {}
        self.values_resource = FakeValuesResource(
            update_result if update_result is not None else {"totalUpdatedCells": 4}
        )
        self.get_calls: list[dict] = []

    def get(self, **kwargs):
        self.get_calls.append(kwargs)
        return FakeRequest(self._get_result)

    def values(self):
        return self.values_resource


class FakeSheetsService:
    def __init__(self, spreadsheets: FakeSpreadsheetsResource):
        self._spreadsheets = spreadsheets

    def spreadsheets(self):
        return self._spreadsheets


# --- Fixtures ------------------------------------------------------------------

@pytest.fixture
def monthly_tree():
    """root → 月次資料 → 2024 → 04 → 月報_202404 (May 2024, zero-based month)."""
    root = DriveFolder(id="root", name="root")
    docs = DriveFolder(id="f-docs", name="月次資料")
    year = DriveFolder(id="f-2024", name="2024")
    month = DriveFolder(id="f-04", name="04")
    return FakeStoragePort(
        root=root,
        children={
            "root": [DriveFolder(id="f-other", name="その他"), docs],
            "f-docs": [DriveFolder(id="f-2023", name="2023"), year],
            "f-2024": [DriveFolder(id="f-03", name="03"), month],
        },
        files={
            "f-04": [
                DriveFile(id="memo", name="memo"),
                DriveFile(id="sheet-202404", name="月報_202404"),
            ],
        },
    )


@pytest.fixture
def env(monkeypatch):
    """Complete required environment; no .env file exists for this APP_ENV."""
    monkeypatch.setenv("APP_ENV", "pytest-missing")
    for name in REQUIRED_VARS + ("GOOGLE_SERVICE_ACCOUNT_FILE", "HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SCRAPBOX_SID", "s3cret")
    monkeypatch.setenv("SCRAPBOX_BASE_URL", "https://scrapbox.io/api")
    monkeypatch.setenv("SCRAPBOX_PROJECT_NAME", "team")
    monkeypatch.setenv("GDRIVE_ROOT_FOLDER_ID", "root")
    return monkeypatch
