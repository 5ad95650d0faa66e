import re
from dataclasses import dataclass
from typing import Mapping

# 인식하는 섹션 종류 (Scrapbox 페이지의 [[Keep]] 등 굵은 글씨 라벨)
KPT_CONTENTS_KINDS: tuple[str, ...] = ("try", "problem", "keep", "other")

# 제목 블록과 각 섹션은 빈 줄로 구분됩니다
_CHUNK_SEPARATOR = "\n\n"
_LINE_SEPARATOR = "\n"
_KIND_PATTERN = re.compile(r"\[\[(.+)\]\]")


@dataclass(frozen=True)
class KPTContents:
    """월보 페이지에서 추출한 KPT 섹션 (네 필드 모두 항상 존재)"""
    keep: str = ""
    problem: str = ""
    try_: str = ""   # 'try' 는 예약어
    other: str = ""

    @classmethod
    def from_mapping(cls, sections: Mapping[str, str]) -> "KPTContents":
        return cls(
            keep=sections.get("keep", ""),
            problem=sections.get("problem", ""),
            try_=sections.get("try", ""),
            other=sections.get("other", ""),
        )

    def get(self, kind: str) -> str:
        if kind not in KPT_CONTENTS_KINDS:
            raise KeyError(kind)
        return self.try_ if kind == "try" else getattr(self, kind)

    def as_dict(self) -> dict[str, str]:
        return {kind: self.get(kind) for kind in KPT_CONTENTS_KINDS}


def parse_kpt_contents(contents: str) -> KPTContents:
    """
    페이지 본문 텍스트를 KPTContents 로 변환합니다.

    첫 번째 블록(제목)은 버리고, 나머지 블록마다 첫 줄의 ``[[종류]]`` 라벨을
    소문자로 읽어 해당 필드에 본문 줄들을 채웁니다.

    - 라벨이 없거나 인식하지 않는 종류의 블록은 건너뜁니다.
    - 같은 종류가 두 번 나오면 마지막 블록이 이깁니다.
    - 예외를 발생시키지 않으며, 없는 섹션은 빈 문자열입니다.
    """
    _title, *chunks = contents.split(_CHUNK_SEPARATOR)

    sections = dict.fromkeys(KPT_CONTENTS_KINDS, "")
    for chunk in chunks:
        label, *body = chunk.split(_LINE_SEPARATOR)

        match = _KIND_PATTERN.search(label)
        if match is None:
            continue

        kind = match.group(1).lower()
        if kind not in sections:
            continue

        sections[kind] = _LINE_SEPARATOR.join(body)

    return KPTContents.from_mapping(sections)
