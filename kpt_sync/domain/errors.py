"""
KPT 월보 동기화에서 사용하는 예외 정의.

모든 예외는 사람이 읽는 메시지와 함께 구조화된 진단 정보(details)를 가지며,
실행 종료 시 JSON 으로 직렬화되어 로그에 남습니다.
"""

import json
from typing import Any


class KPTSyncError(Exception):
    """KPT 동기화 예외의 기반 클래스"""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.to_json()}"
        return self.message

    def to_json(self) -> str:
        """진단 정보를 JSON 문자열로 직렬화합니다."""
        return json.dumps(self.details, ensure_ascii=False, default=str)


class ConfigError(KPTSyncError):
    """필수 환경 변수가 없거나 비어 있음, 또는 값의 형식이 잘못됨"""

    def __init__(
        self,
        missing: list[str] | None = None,
        invalid: dict[str, str] | None = None,
    ) -> None:
        missing = list(missing or [])
        invalid = dict(invalid or {})
        problems = []
        if missing:
            problems.append(f"필수 환경 변수 누락: {', '.join(missing)}")
        if invalid:
            problems.append(f"잘못된 환경 변수 값: {', '.join(invalid)}")
        super().__init__("; ".join(problems), {"missing": missing, "invalid": invalid})
        self.missing = missing
        self.invalid = invalid


class FetchError(KPTSyncError):
    """페이지 조회 실패 (200 이외의 응답 또는 전송 오류)"""

    def __init__(
        self,
        response_code: int | None,
        headers: dict[str, str] | None = None,
        contents: str = "",
        url: str = "",
    ) -> None:
        if response_code is None:
            message = f"페이지 조회 실패: {url}"
        else:
            message = f"페이지 조회 실패 (HTTP {response_code}): {url}"
        super().__init__(
            message,
            {
                "headers": dict(headers or {}),
                "contents": contents,
                "response_code": response_code,
            },
        )
        self.response_code = response_code
        self.headers = dict(headers or {})
        self.contents = contents
        self.url = url


class NotFoundError(KPTSyncError):
    """저장소에서 폴더 또는 문서를 찾지 못함"""


class FolderNotFoundError(NotFoundError):
    """폴더 경로의 일부 세그먼트가 존재하지 않음"""

    def __init__(self, pathnames: list[str], root_folder_id: str) -> None:
        message = f"폴더를 찾을 수 없습니다: {'/'.join(pathnames)} (root={root_folder_id})"
        super().__init__(
            message,
            {"found": False, "pathnames": list(pathnames), "root_folder_id": root_folder_id},
        )
        self.pathnames = list(pathnames)
        self.root_folder_id = root_folder_id


class SpreadsheetNotFoundError(NotFoundError):
    """폴더 안에 이름이 일치하는 문서가 없음"""

    def __init__(self, name: str, folder: dict[str, str]) -> None:
        message = f"스프레드시트를 찾을 수 없습니다: {name} (folder={folder.get('id', '')})"
        super().__init__(message, {"found": False, "name": name, "folder": dict(folder)})
        self.name = name
        self.folder = dict(folder)
