from dataclasses import dataclass
from datetime import datetime

from kpt_sync.domain.kpt import KPTContents

# 월보 페이지/스프레드시트 이름 접두사
REPORT_NAME_PREFIX = "月報"
# 루트 폴더 아래 월별 자료 폴더
REPORT_ROOT_FOLDER_NAME = "月次資料"

# KPT 종류별 기록 셀 (첫 번째 시트)
KPT_CELL_ADDRESSES: dict[str, str] = {
    "keep": "B8",
    "problem": "B12",
    "try": "B16",
    "other": "B20",
}


@dataclass(frozen=True)
class StorageLocation:
    """폴더 경로 + 최종 문서 이름"""
    pathnames: tuple[str, ...]
    name: str


@dataclass(frozen=True)
class CalendarMonthKey:
    """
    월보를 찾기 위한 연/월 키.

    month 는 0부터 시작하는 월 인덱스를 두 자리로 채운 값입니다 (1월 → "00").
    기존 페이지 이름과 폴더 이름이 이 규칙으로 만들어져 있으므로 그대로 유지합니다.
    """
    year: str
    month: str

    @classmethod
    def from_datetime(cls, tod: datetime) -> "CalendarMonthKey":
        return cls(year=f"{tod.year:04d}", month=f"{tod.month - 1:02d}")

    @property
    def report_name(self) -> str:
        return f"{REPORT_NAME_PREFIX}_{self.year}{self.month}"

    @property
    def folder_path(self) -> tuple[str, ...]:
        return (REPORT_ROOT_FOLDER_NAME, self.year, self.month)

    def storage_location(self) -> StorageLocation:
        return StorageLocation(pathnames=self.folder_path, name=self.report_name)


@dataclass(frozen=True)
class DriveFolder:
    """저장소 폴더 엔티티"""
    id: str
    name: str


@dataclass(frozen=True)
class DriveFile:
    """저장소 파일 엔티티"""
    id: str
    name: str
    mime_type: str = ""


@dataclass(frozen=True)
class SpreadsheetDocument:
    """월보 스프레드시트"""
    id: str
    name: str
    url: str


@dataclass(frozen=True)
class UpdateResult:
    """월보 갱신 결과"""
    succeed: bool
    kpt: KPTContents
    spreadsheet: SpreadsheetDocument

    def as_dict(self) -> dict:
        return {
            "succeed": self.succeed,
            "kpt": self.kpt.as_dict(),
            "spreadsheet": {
                "id": self.spreadsheet.id,
                "name": self.spreadsheet.name,
                "url": self.spreadsheet.url,
            },
        }
