from dataclasses import dataclass
from functools import lru_cache

from kpt_sync.adapters.outbound.google_api import load_google_credentials
from kpt_sync.adapters.outbound.google_drive_adapter import GoogleDriveAdapter
from kpt_sync.adapters.outbound.google_sheets_adapter import GoogleSheetsAdapter
from kpt_sync.adapters.outbound.scrapbox_adapter import ScrapboxAdapter
from kpt_sync.application.use_cases.fetch_kpt_contents import FetchKPTContentsUseCase
from kpt_sync.application.use_cases.locate_monthly_report import LocateMonthlyReportUseCase
from kpt_sync.application.use_cases.overwrite_kpt_contents import OverwriteKPTContentsUseCase
from kpt_sync.application.use_cases.update_monthly_report import UpdateMonthlyReportUseCase
from kpt_sync.configuration.settings import Settings, build_settings


@dataclass(frozen=True)
class Container:
    settings: Settings
    fetch_kpt_contents_use_case: FetchKPTContentsUseCase
    locate_monthly_report_use_case: LocateMonthlyReportUseCase
    overwrite_kpt_contents_use_case: OverwriteKPTContentsUseCase
    update_monthly_report_use_case: UpdateMonthlyReportUseCase


@lru_cache(maxsize=1)
def build_container() -> Container:
    settings = build_settings()

    scrapbox_adapter = ScrapboxAdapter(
        base_url=settings.scrapbox_base_url,
        sid=settings.scrapbox_sid,
        timeout=settings.http_timeout_seconds,
    )

    credentials = load_google_credentials(settings.google_service_account_file)
    drive_adapter = GoogleDriveAdapter.from_credentials(credentials)
    sheets_adapter = GoogleSheetsAdapter.from_credentials(credentials)

    fetch_kpt_contents_use_case = FetchKPTContentsUseCase(
        page_port=scrapbox_adapter,
        project_name=settings.scrapbox_project_name,
    )

    locate_monthly_report_use_case = LocateMonthlyReportUseCase(
        storage_port=drive_adapter,
        spreadsheet_port=sheets_adapter,
        root_folder_id=settings.gdrive_root_folder_id,
    )

    overwrite_kpt_contents_use_case = OverwriteKPTContentsUseCase(
        spreadsheet_port=sheets_adapter,
    )

    # 조회 두 건을 병렬로 실행한 뒤 셀을 덮어쓰는 오케스트레이터
    update_monthly_report_use_case = UpdateMonthlyReportUseCase(
        fetch_kpt_contents=fetch_kpt_contents_use_case,
        locate_monthly_report=locate_monthly_report_use_case,
        overwrite_kpt_contents=overwrite_kpt_contents_use_case,
    )

    return Container(
        settings=settings,
        fetch_kpt_contents_use_case=fetch_kpt_contents_use_case,
        locate_monthly_report_use_case=locate_monthly_report_use_case,
        overwrite_kpt_contents_use_case=overwrite_kpt_contents_use_case,
        update_monthly_report_use_case=update_monthly_report_use_case,
    )


def clear_container() -> None:
    build_container.cache_clear()
