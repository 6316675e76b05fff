"""
보고서 렌더러

Statement 를 페이지로 나누고 ICanvas 에 그린다.
캔버스 구현(reportlab, Mock)과 무관하게 같은 좌표를 사용한다.

페이지 구성 (위에서 아래로):
    회사명 / 보고서 제목
    계정 카드 (단일 계정 원장만)
    기간, 요약 잔액, "Page N of M"
    테이블 헤더 (GOLD (g) / AMOUNT (KWD) 그룹 밴드)
    행 (기초 잔액, 전표, 기말 잔액, 합계)
    푸터
"""

import logging
from decimal import Decimal
from typing import Any

from adapters.interfaces import ICanvas
from core.config.loader import PageConfig, ReportConfig
from core.ledger.aggregate import AccountSummary, TypeSummaryRow
from core.ledger.models import LedgerEntry
from core.report.formatting import (
    Colors,
    balance_color,
    clean_description,
    format_amount,
    format_balance,
    format_grouped,
    truncate,
    type_colors,
)
from core.report.layout import Column, group_spans
from core.report.paginator import ReportPage, paginate
from core.report.statement import Statement, TotalsRow
from core.utils.timezone import format_display_date

logger = logging.getLogger(__name__)

# 글자 크기
TITLE_SIZE = 24
SUBTITLE_SIZE = 18
INFO_SIZE = 10
TABLE_HEADER_SIZE = 9
CELL_SIZE = 8
FOOTER_SIZE = 9

CELL_PADDING = 4
ROW_TEXT_OFFSET = 6  # 행 아랫변에서 베이스라인까지
ACCOUNT_CARD_HEIGHT = 40

BOLD = "bold"
NORMAL = "normal"


class Cell:
    """그릴 셀 1개"""

    __slots__ = ("text", "color", "weight", "badge")

    def __init__(self, text: str, color: str = Colors.GRAY700, weight: str = NORMAL, badge: str | None = None):
        self.text = text
        self.color = color
        self.weight = weight
        self.badge = badge  # 배지 배경색 (전표 유형)


class StatementRenderer:
    """Statement → 캔버스

    사용 예시:
    ```python
    renderer = StatementRenderer(ReportLabCanvas(), get_settings().report)
    pages = renderer.render(ledger_statement(account, ledger, date_range))
    pdf_bytes = renderer.canvas.finish()
    ```
    """

    def __init__(self, canvas: ICanvas, config: ReportConfig):
        self.canvas = canvas
        self.config = config

    # -------------------------------------------------------------------------
    # 진입점
    # -------------------------------------------------------------------------

    def render(self, statement: Statement) -> list[ReportPage]:
        """보고서 전체 렌더링

        Returns:
            그려진 페이지 목록

        Raises:
            PageTooSmall: 페이지 기하로 행을 배치할 수 없음 (그리기 전에 발생)
        """
        page_config = self.config.page_config(statement.kind)
        pages = paginate(
            statement.body,
            page_config,
            leading=statement.leading,
            trailing=statement.trailing,
            column_set=statement.column_set,
        )
        for page in pages:
            self._draw_page(statement, page, page_config)

        logger.info(
            f"보고서 렌더링 완료: kind={statement.kind.value}, "
            f"rows={statement.row_count}, pages={len(pages)}"
        )
        return pages

    # -------------------------------------------------------------------------
    # 페이지
    # -------------------------------------------------------------------------

    def _draw_page(self, statement: Statement, page: ReportPage, page_config: PageConfig) -> None:
        geometry = page_config.geometry
        self.canvas.new_page(geometry.width, geometry.height)
        self._draw_background(page_config)
        self._draw_header(statement, page, page_config)
        self._draw_table_header(statement, page, page_config)
        for row, layout in zip(page.rows, page.row_layouts):
            self._draw_row(statement, page, page_config, row, layout.top, layout.zebra)
        self._draw_footer(statement, page, page_config)

    def _draw_background(self, page_config: PageConfig) -> None:
        g = page_config.geometry
        self.canvas.draw_rect(0, 0, g.width, g.height, fill_color=Colors.BLUE50)
        self.canvas.draw_rect(
            g.margin, g.margin, g.width - 2 * g.margin, g.height - 2 * g.margin,
            fill_color=Colors.WHITE, stroke_color=Colors.BLUE300, stroke_width=2,
        )

    def _draw_right(self, text: str, right: float, y: float, size: float, weight: str, color: str) -> None:
        width = self.canvas.measure_text_width(text, size, weight)
        self.canvas.draw_text(text, right - width, y, size, weight, color)

    def _draw_header(self, statement: Statement, page: ReportPage, page_config: PageConfig) -> None:
        g = page_config.geometry
        header = statement.header
        x = g.table_x
        right = g.width - g.margin - g.table_inset
        top = g.height - g.margin

        self.canvas.draw_text(self.config.company_name, x, top - 28, TITLE_SIZE, BOLD, Colors.BLUE800)
        self.canvas.draw_text(header.title, x, top - 50, SUBTITLE_SIZE, BOLD, Colors.BLUE600)

        y = top - 75
        if header.card_lines:
            card_bottom = top - 100
            self.canvas.draw_rect(
                x, card_bottom, g.table_width, ACCOUNT_CARD_HEIGHT,
                fill_color=Colors.BLUE100, stroke_color=Colors.BLUE300, stroke_width=1.5,
            )
            self.canvas.draw_text(header.card_lines[0], x + 15, card_bottom + 24, INFO_SIZE, BOLD, Colors.BLUE800)
            for i, line in enumerate(header.card_lines[1:]):
                self.canvas.draw_text(line, x + 15, card_bottom + 10 - i * 12, 9, NORMAL, Colors.BLUE700)
            y = top - 120

        if header.period:
            self.canvas.draw_text(header.period, x, y, 12, BOLD, Colors.BLUE800)

        line_y = y
        for line in header.summary:
            color = balance_color(line.value) if line.value is not None else Colors.BLUE700
            self._draw_right(line.text, right, line_y, INFO_SIZE, NORMAL, color)
            line_y -= 14

        self._draw_right(
            f"Page {page.page_number} of {page.total_pages}",
            right, line_y, INFO_SIZE, BOLD, Colors.BLUE800,
        )

    def _draw_table_header(self, statement: Statement, page: ReportPage, page_config: PageConfig) -> None:
        g = page_config.geometry
        x0 = g.table_x
        bottom = page.header_top - g.header_height
        column_set = statement.column_set
        widths = page.column_widths

        self.canvas.draw_rect(
            x0, bottom, sum(widths), g.header_height,
            fill_color=Colors.BLUE100, stroke_color=Colors.BLUE300, stroke_width=1,
        )

        if column_set.has_groups:
            band_y = page.header_top - 14
            for label, offset, width in group_spans(column_set, list(widths)):
                text_width = self.canvas.measure_text_width(label, INFO_SIZE, BOLD)
                self.canvas.draw_text(label, x0 + offset + (width - text_width) / 2, band_y, INFO_SIZE, BOLD, Colors.BLUE800)
                self.canvas.draw_line(
                    (x0 + offset, page.header_top - g.header_height / 2),
                    (x0 + offset + width, page.header_top - g.header_height / 2),
                    Colors.BLUE300, 1,
                )
            header_y = bottom + 7
        else:
            header_y = bottom + (g.header_height - TABLE_HEADER_SIZE) / 2

        x = x0
        for column, width in zip(column_set.columns, widths):
            text_width = self.canvas.measure_text_width(column.header, TABLE_HEADER_SIZE, BOLD)
            self.canvas.draw_text(column.header, x + (width - text_width) / 2, header_y, TABLE_HEADER_SIZE, BOLD, Colors.BLUE800)
            x += width

    def _draw_footer(self, statement: Statement, page: ReportPage, page_config: PageConfig) -> None:
        g = page_config.geometry
        text = (
            f"{statement.header.footer_label} - Generated by {self.config.company_name} - "
            f"Page {page.page_number} of {page.total_pages}"
        )
        width = self.canvas.measure_text_width(text, FOOTER_SIZE, NORMAL)
        self.canvas.draw_text(text, (g.width - width) / 2, g.margin + 10, FOOTER_SIZE, NORMAL, Colors.GRAY600)

    # -------------------------------------------------------------------------
    # 행
    # -------------------------------------------------------------------------

    def _row_background(self, row: Any, zebra: bool) -> str:
        if isinstance(row, TotalsRow):
            return Colors.BLUE100
        if isinstance(row, LedgerEntry) and row.is_opening_balance:
            return Colors.BLUE50
        if isinstance(row, LedgerEntry) and row.is_closing_balance:
            return Colors.INDIGO100
        return Colors.BLUE50 if zebra else Colors.WHITE

    def _draw_row(
        self,
        statement: Statement,
        page: ReportPage,
        page_config: PageConfig,
        row: Any,
        top: float,
        zebra: bool,
    ) -> None:
        g = page_config.geometry
        x = g.table_x
        bottom = top - g.row_height
        widths = page.column_widths

        self.canvas.draw_rect(x, bottom, sum(widths), g.row_height, fill_color=self._row_background(row, zebra))

        baseline = bottom + ROW_TEXT_OFFSET
        for column, width in zip(statement.column_set.columns, widths):
            cell = self._cell(statement, column, row)
            if cell is not None and cell.text:
                self._draw_cell(cell, column, x, baseline, width, g.row_height, bottom)
            x += width

        self.canvas.draw_line((g.table_x, bottom), (g.table_x + sum(widths), bottom), Colors.GRAY200, 0.5)

    def _draw_cell(
        self,
        cell: Cell,
        column: Column,
        x: float,
        baseline: float,
        width: float,
        row_height: float,
        bottom: float,
    ) -> None:
        text_width = self.canvas.measure_text_width(cell.text, CELL_SIZE, cell.weight)
        if column.align == "right":
            text_x = x + width - text_width - CELL_PADDING
        elif column.align == "center":
            text_x = x + (width - text_width) / 2
        else:
            text_x = x + CELL_PADDING

        if cell.badge:
            self.canvas.draw_rect(text_x - 2, bottom + 3, text_width + 4, row_height - 6, fill_color=cell.badge)
        self.canvas.draw_text(cell.text, text_x, baseline, CELL_SIZE, cell.weight, cell.color)

    # -------------------------------------------------------------------------
    # 셀 값
    # -------------------------------------------------------------------------

    def _cell(self, statement: Statement, column: Column, row: Any) -> Cell | None:
        if isinstance(row, TotalsRow):
            return self._totals_cell(statement, column, row)
        if isinstance(row, LedgerEntry):
            return self._entry_cell(statement, column, row)
        if isinstance(row, AccountSummary):
            return self._summary_cell(statement, column, row)
        if isinstance(row, TypeSummaryRow):
            return self._type_cell(column, row)
        raise TypeError(f"렌더링할 수 없는 행 타입: {type(row).__name__}")

    @staticmethod
    def _balance_cell(value: Decimal, weight: str = NORMAL) -> Cell:
        return Cell(format_balance(value), balance_color(value), weight)

    def _entry_cell(self, statement: Statement, column: Column, entry: LedgerEntry) -> Cell | None:
        key = column.key
        if key == "date":
            if entry.is_opening_balance:
                return Cell(format_display_date(entry.date, "Beginning"))
            if entry.is_closing_balance:
                return Cell(format_display_date(entry.date, "Present"))
            return Cell(format_display_date(entry.date))
        if key == "type":
            color, background = type_colors(entry.type)
            return Cell(entry.type, color, BOLD, badge=background)
        if key == "account":
            if entry.is_synthetic or entry.account_id is None:
                return None
            account = statement.accounts.get(entry.account_id)
            name = account.name if account else entry.account_id
            return Cell(truncate(name, 16))
        if key == "description":
            if entry.is_synthetic:
                return Cell(entry.description, Colors.BLUE800, BOLD)
            return Cell(truncate(clean_description(entry.description), statement.description_limit))
        if key == "gold_rate":
            if not entry.gold_rate:
                return Cell("-")
            return Cell(format_amount(entry.gold_rate), Colors.YELLOW600, BOLD)
        if key.endswith("_balance"):
            return self._balance_cell(getattr(entry, key), BOLD if entry.is_synthetic else NORMAL)
        if key.endswith("_debit") or key.endswith("_credit"):
            return Cell(format_amount(getattr(entry, key)))
        return None

    def _summary_cell(self, statement: Statement, column: Column, summary: AccountSummary) -> Cell | None:
        key = column.key
        if key == "account_no":
            return Cell(str(summary.account_no))
        if key == "name":
            return Cell(truncate(summary.name, 35))
        if key == "phone":
            account = statement.accounts.get(summary.account_id)
            return Cell((account.phone if account else None) or "N/A")
        if key in ("gold_balance", "kwd_balance"):
            return self._balance_cell(getattr(summary, key))
        if key == "transactions":
            return Cell(str(summary.transaction_count))
        return None

    def _type_cell(self, column: Column, row: TypeSummaryRow) -> Cell | None:
        key = column.key
        if key == "account_type":
            return Cell(row.account_type, Colors.BLUE800, BOLD)
        if key == "accounts":
            return Cell(str(row.total_accounts))
        if key == "transactions":
            return Cell(str(row.total_transactions))
        if key in ("gold_balance", "kwd_balance", "locker_gold"):
            return self._balance_cell(getattr(row, key))
        if key == "status":
            color = Colors.GREEN600 if row.status == "Active" else Colors.GRAY600
            return Cell(row.status, color, BOLD)
        return None

    def _totals_cell(self, statement: Statement, column: Column, row: TotalsRow) -> Cell | None:
        # 라벨은 첫 번째 텍스트 컬럼(설명/계정명/유형)에 둔다
        label_key = next(
            (k for k in ("description", "name", "account_type") if statement.column_set.index_of(k) is not None),
            statement.column_set.keys[0],
        )
        if column.key == label_key:
            return Cell(row.label, Colors.BLUE800, BOLD)
        if column.key not in row.values:
            return None

        value = row.values[column.key]
        if isinstance(value, Decimal):
            if column.is_balance:
                return self._balance_cell(value, BOLD)
            return Cell(format_grouped(value), Colors.BLUE800, BOLD)
        return Cell(str(value), Colors.BLUE800, BOLD)
