from functools import reduce
from typing import Sequence

SEPARATOR = "/"


def join_path(lhs: str, rhs: str) -> str:
    """두 경로를 구분자 하나로 연결합니다. 경계의 중복 구분자는 제거됩니다."""
    return lhs.rstrip(SEPARATOR) + SEPARATOR + rhs.strip(SEPARATOR)


def join_paths(paths: Sequence[str]) -> str:
    """경로 목록을 왼쪽부터 차례로 연결합니다.

    최소 한 개의 세그먼트가 필요합니다. 세그먼트가 하나뿐이면 그대로 반환합니다.

    Raises:
        ValueError: 빈 목록이 주어진 경우
    """
    if not paths:
        raise ValueError("join_paths 에는 최소 한 개의 경로가 필요합니다")
    return reduce(join_path, paths)
