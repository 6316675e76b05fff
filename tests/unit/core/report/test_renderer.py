"""
core/report/renderer.py 테스트

MockCanvas 로 드로잉 호출을 기록하여 검증
"""

from datetime import date
from decimal import Decimal

import pytest

from adapters.mock import MockCanvas
from core.config.loader import ReportConfig
from core.ledger.aggregate import aggregate, summarize_types
from core.ledger.calculator import compute_ledger
from core.ledger.models import Account
from core.ledger.open_balance import compute_open_balance_ledger
from core.ledger.period import DateRange
from core.report.formatting import Colors
from core.report.paginator import PageTooSmall
from core.report.renderer import StatementRenderer
from core.report.statement import (
    balances_statement,
    ledger_statement,
    open_balance_statement,
    type_summary_statement,
)


@pytest.fixture
def canvas() -> MockCanvas:
    return MockCanvas()


@pytest.fixture
def renderer(canvas: MockCanvas, report_config: ReportConfig) -> StatementRenderer:
    return StatementRenderer(canvas, report_config)


class TestLedgerRendering:
    """단일 계정 원장 렌더링"""

    def test_single_page(self, canvas, renderer, market_account, quarter_vouchers) -> None:
        """헤더, 카드, 페이지 번호, 푸터"""
        statement = ledger_statement(market_account, compute_ledger(quarter_vouchers))

        pages = renderer.render(statement)

        assert len(pages) == canvas.page_count == 1
        texts = canvas.texts(page=1)
        assert "BLOUDAN JEWELLERY" in texts
        assert "Account Ledger Statement" in texts
        assert "Account No: 1" in texts
        assert "Period: Beginning to Present" in texts
        assert "Page 1 of 1" in texts
        assert "Account Ledger - Generated by BLOUDAN JEWELLERY - Page 1 of 1" in texts
        assert "GOLD (g)" in texts and "AMOUNT (KWD)" in texts

    def test_synthetic_row_labels(self, canvas, renderer, market_account, quarter_vouchers) -> None:
        """기간 없는 합성 행은 Beginning / Present"""
        renderer.render(ledger_statement(market_account, compute_ledger(quarter_vouchers)))

        texts = canvas.texts()
        assert "Beginning" in texts
        assert "Present" in texts
        assert "Opening Balance" in texts
        assert "Closing Balance" in texts
        assert "Totals" in texts

    def test_balance_colors(self, canvas, renderer, market_account, make_voucher) -> None:
        """음수 잔액은 Db + 빨강"""
        vouchers = [make_voucher("v1", "2024-01-01", "REC", gold="2", kwd="1")]

        renderer.render(ledger_statement(market_account, compute_ledger(vouchers)))

        calls = canvas.find_text("2.000 Db")
        assert calls
        assert all(c.args["color"] == Colors.RED700 for c in calls)

    def test_multi_page(self, canvas, renderer, market_account, make_voucher) -> None:
        """기본 원장 설정(페이지당 15행)에서 본문 30행 → 3쪽"""
        vouchers = [
            make_voucher(f"v{i:02d}", date(2024, 1, 1 + i % 28), "INV", gold="1")
            for i in range(30)
        ]

        pages = renderer.render(ledger_statement(market_account, compute_ledger(vouchers)))

        # 기초 1 + 본문 30 + 기말/합계 2 = 33행
        assert len(pages) == 3
        assert "Page 3 of 3" in canvas.texts(page=3)
        assert "Opening Balance" in canvas.texts(page=1)
        assert "Opening Balance" not in canvas.texts(page=2)
        assert "Totals" in canvas.texts(page=3)

    def test_rows_inside_table_area(self, canvas, renderer, report_config, market_account, quarter_vouchers) -> None:
        """행 배경 사각형은 table_start_y 와 table_end_y 사이"""
        page_config = report_config.page_config("ledger")
        row_height = page_config.geometry.row_height

        renderer.render(ledger_statement(market_account, compute_ledger(quarter_vouchers)))

        row_rects = [
            c for c in canvas.calls_on(1, "rect")
            if c.args["h"] == row_height and c.args["stroke_color"] is None
        ]
        assert row_rects
        for call in row_rects:
            assert call.args["y"] >= page_config.table_end_y
            assert call.args["y"] + call.args["h"] <= page_config.table_start_y

    def test_description_truncated(self, canvas, renderer, market_account, make_voucher) -> None:
        """긴 설명은 40자로 자름"""
        vouchers = [make_voucher("v1", "2024-01-01", "INV", gold="1", description="x" * 80)]

        renderer.render(ledger_statement(market_account, compute_ledger(vouchers)))

        assert "x" * 37 + "..." in canvas.texts()


class TestSummaryRendering:
    """잔액 / 유형 요약 렌더링"""

    def test_balances(self, canvas, renderer) -> None:
        """계정 행과 전화번호 N/A"""
        account = Account(id="c1", account_no=7, name="Caster", type="Casting")
        group = aggregate([(account, [])])

        renderer.render(balances_statement(group, {account.id: account}))

        texts = canvas.texts()
        assert "7" in texts
        assert "Caster" in texts
        assert "N/A" in texts
        assert "Casting Accounts - Balance Summary" in texts

    def test_type_summary(self, canvas, renderer) -> None:
        """유형 행과 Overall 행"""
        group = aggregate([(Account(id="m", account_no=1, name="M", type="Market"), [])])

        renderer.render(type_summary_statement(summarize_types([group], {"Market": Decimal("-1")})))

        texts = canvas.texts()
        assert "Market" in texts
        assert "Inactive" in texts
        assert "Overall" in texts
        assert "1.000 Db" in texts


class TestOpenBalanceRendering:
    """시세 고정 원장 렌더링"""

    def test_gold_rate_cell(self, canvas, renderer, market_account, make_voucher) -> None:
        """시세 있는 행은 단가, 없는 행은 "-" """
        accounts = {market_account.id: market_account}
        vouchers = [
            make_voucher("r1", "2024-01-10", "REC", gold="5", gold_rate=Decimal("19.5"), fixing_amount=Decimal("97.5")),
            make_voucher("g1", "2024-01-12", "GFV", gold="2", kwd="40"),
        ]

        renderer.render(open_balance_statement(compute_open_balance_ledger(vouchers, accounts), accounts))

        texts = canvas.texts(page=1)
        assert "Open Balance Ledger" in texts
        assert "Gold Rate" in texts
        assert "Period: Beginning to Present | Transactions: 2 total (1 REC, 1 GFV)" in texts
        rate_calls = canvas.find_text("19.500")
        assert len(rate_calls) == 1
        assert rate_calls[0].args["color"] == Colors.YELLOW600
        assert "-" in texts


class TestRenderErrors:
    """렌더링 오류"""

    def test_page_too_small_draws_nothing(self, canvas, market_account) -> None:
        """용량 오류는 그리기 전에 발생"""
        config = ReportConfig(header_sections={"ledger": 600})
        renderer = StatementRenderer(canvas, config)

        with pytest.raises(PageTooSmall):
            renderer.render(ledger_statement(market_account, []))

        assert canvas.page_count == 0

    def test_date_range_period(self, canvas, renderer, market_account, quarter_vouchers) -> None:
        """기간 문구"""
        date_range = DateRange(date(2024, 2, 1), date(2024, 2, 29))

        renderer.render(ledger_statement(market_account, compute_ledger(quarter_vouchers), date_range))

        assert "Period: 01/02/2024 to 29/02/2024" in canvas.texts()
        assert "01/02/2024" in canvas.texts()
