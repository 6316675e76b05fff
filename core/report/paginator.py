"""
보고서 페이지 분할

평탄한 행 목록을 고정 크기 페이지로 나누고 페이지별 기하 정보를 계산한다.
선두 행(기초 잔액)은 첫 페이지에만, 후미 행(기말 잔액, 합계)은 마지막 페이지에만 둔다.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Sequence

from core.config.loader import PageConfig
from core.report.layout import ColumnSet

logger = logging.getLogger(__name__)


class ReportError(Exception):
    """보고서 생성 예외 (기본 클래스)"""

    pass


class PageTooSmall(ReportError):
    """페이지 기하로는 행을 배치할 수 없음

    설정 오류. 행을 처리하기 전에 즉시 발생한다.
    """

    def __init__(self, rows_per_page: int, required: int = 1):
        self.rows_per_page = rows_per_page
        self.required = required
        super().__init__(
            f"페이지가 너무 작습니다: rows_per_page={rows_per_page}, "
            f"최소 필요={required}"
        )


@dataclass(frozen=True)
class RowLayout:
    """행 1개의 배치

    top: 행 윗변 y 좌표 (PDF 좌표계, 아래로 갈수록 작아짐)
    zebra: 페이지 내 홀수 행 여부 (배경색 교대)
    """

    top: float
    zebra: bool


@dataclass(frozen=True)
class ReportPage:
    """페이지 1장 분량의 행과 기하 정보"""

    page_number: int
    total_pages: int
    rows: tuple[Any, ...]
    column_widths: tuple[float, ...]
    header_top: float
    rows_top: float
    row_layouts: tuple[RowLayout, ...]

    @property
    def is_first(self) -> bool:
        return self.page_number == 1

    @property
    def is_last(self) -> bool:
        return self.page_number == self.total_pages


def validate_capacity(rows_per_page: int, leading: int = 0, trailing: int = 0) -> None:
    """페이지 용량 검증

    Raises:
        PageTooSmall: 용량이 0 이하이거나 선두/후미 행을 한 페이지에 담을 수 없음
    """
    required = max(1, leading, trailing)
    if rows_per_page < required:
        raise PageTooSmall(rows_per_page, required)


def split_rows(
    rows: Sequence[Any],
    rows_per_page: int,
    leading: Sequence[Any] = (),
    trailing: Sequence[Any] = (),
) -> list[list[Any]]:
    """행 목록을 페이지 단위로 분할

    선두 행 + 본문 행을 순서대로 채우고, 후미 행이 마지막 페이지에 다 들어가지
    않으면 새 페이지에 둔다. 결과 페이지 수는
    max(1, ceil((본문 + 선두 + 후미) / rows_per_page)) 와 같다.

    Raises:
        PageTooSmall: validate_capacity 참고
    """
    validate_capacity(rows_per_page, len(leading), len(trailing))

    body = list(leading) + list(rows)
    chunks = [
        body[i:i + rows_per_page]
        for i in range(0, len(body), rows_per_page)
    ]

    if not chunks:
        chunks = [[]]
    if len(chunks[-1]) + len(trailing) > rows_per_page:
        chunks.append([])
    chunks[-1].extend(trailing)

    expected = max(1, math.ceil((len(rows) + len(leading) + len(trailing)) / rows_per_page))
    assert len(chunks) == expected, (len(chunks), expected)
    return chunks


def paginate(
    rows: Sequence[Any],
    page_config: PageConfig,
    leading: Sequence[Any] = (),
    trailing: Sequence[Any] = (),
    column_set: ColumnSet | None = None,
) -> list[ReportPage]:
    """행 목록 → 페이지 목록

    Args:
        rows: 본문 행 (원장 행, 계정 요약 등)
        page_config: 보고서 종류별 페이지 설정
        leading: 첫 페이지 맨 위에 둘 행 (기초 잔액)
        trailing: 마지막 페이지 맨 아래에 둘 행 (기말 잔액, 합계)
        column_set: 컬럼 구성 (None이면 column_widths 는 빈 튜플)

    Returns:
        ReportPage 목록 (최소 1장)

    Raises:
        PageTooSmall: 행 처리 전에 용량을 검증
    """
    rows_per_page = page_config.rows_per_page
    chunks = split_rows(rows, rows_per_page, leading, trailing)

    geometry = page_config.geometry
    widths = tuple(column_set.widths(geometry.table_width)) if column_set else ()
    header_top = page_config.table_start_y
    rows_top = header_top - geometry.header_height
    total_pages = len(chunks)

    pages: list[ReportPage] = []
    for number, chunk in enumerate(chunks, start=1):
        layouts = tuple(
            RowLayout(top=rows_top - i * geometry.row_height, zebra=i % 2 == 1)
            for i in range(len(chunk))
        )
        pages.append(ReportPage(
            page_number=number,
            total_pages=total_pages,
            rows=tuple(chunk),
            column_widths=widths,
            header_top=header_top,
            rows_top=rows_top,
            row_layouts=layouts,
        ))

    logger.debug(
        f"페이지 분할 완료: rows={len(rows)}, leading={len(leading)}, "
        f"trailing={len(trailing)}, rows_per_page={rows_per_page}, pages={total_pages}"
    )
    return pages
