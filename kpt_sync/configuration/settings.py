import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from kpt_sync.domain.errors import ConfigError

REQUIRED_VARS = (
    "SCRAPBOX_SID",
    "SCRAPBOX_BASE_URL",
    "SCRAPBOX_PROJECT_NAME",
    "GDRIVE_ROOT_FOLDER_ID",
)


def _load_env() -> None:
    app_env = os.getenv("APP_ENV", "local")
    # 프로젝트 루트 디렉토리 찾기 (kpt_sync/configuration/settings.py -> ../../)
    project_root = Path(__file__).parent.parent.parent
    env_file = project_root / f".env.{app_env}"
    load_dotenv(env_file)


@dataclass(frozen=True)
class Settings:
    app_env: str
    scrapbox_sid: str
    scrapbox_base_url: str
    scrapbox_project_name: str
    gdrive_root_folder_id: str
    google_service_account_file: str  # 비어있으면 Application Default Credentials
    http_timeout_seconds: float

    def __repr__(self) -> str:
        # 세션 토큰은 로그에 남기지 않음
        return (
            f"Settings(app_env={self.app_env!r}, "
            f"scrapbox_base_url={self.scrapbox_base_url!r}, "
            f"scrapbox_project_name={self.scrapbox_project_name!r}, "
            f"gdrive_root_folder_id={self.gdrive_root_folder_id!r})"
        )


def _parse_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(invalid={name: raw}) from e


def build_settings() -> Settings:
    _load_env()

    missing = [k for k in REQUIRED_VARS if not os.getenv(k)]
    if missing:
        raise ConfigError(missing)

    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        scrapbox_sid=os.environ["SCRAPBOX_SID"],
        scrapbox_base_url=os.environ["SCRAPBOX_BASE_URL"],
        scrapbox_project_name=os.environ["SCRAPBOX_PROJECT_NAME"],
        gdrive_root_folder_id=os.environ["GDRIVE_ROOT_FOLDER_ID"],
        google_service_account_file=os.getenv("GOOGLE_SERVICE_ACCOUNT_FILE", ""),
        http_timeout_seconds=_parse_float("HTTP_TIMEOUT_SECONDS", "30"),
    )
