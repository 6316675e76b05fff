"""
보고서 서비스

원장 계산 → Statement 구성 → 렌더링 → PDF(Base64) 응답.
"""

import base64
import logging
from typing import Any, Callable

from adapters.interfaces import ICanvas
from adapters.pdf import ReportLabCanvas
from core.config.loader import ReportConfig
from core.ledger import Account, Voucher, compute_ledger
from core.ledger.period import DateRange
from core.report import (
    Statement,
    StatementRenderer,
    balances_statement,
    group_ledger_statement,
    ledger_statement,
    locker_statement,
    open_balance_statement,
    type_summary_statement,
)
from core.types import LedgerScope
from core.utils.timezone import now_kwt
from web.services.ledger_service import LedgerService, sort_accounts

logger = logging.getLogger(__name__)


def _slug(text: str) -> str:
    return "_".join(text.split()).replace("/", "-")


class ReportService:
    """PDF 보고서 생성 서비스

    canvas_factory 로 캔버스 구현을 교체할 수 있다 (테스트에서는 MockCanvas).
    """

    def __init__(
        self,
        config: ReportConfig,
        canvas_factory: Callable[[], ICanvas] | None = None,
        ledger_service: LedgerService | None = None,
    ):
        self.config = config
        self.canvas_factory = canvas_factory or ReportLabCanvas
        self.ledger_service = ledger_service or LedgerService()

    def render(self, statement: Statement, filename: str) -> dict[str, Any]:
        """Statement → PDF 응답 dict

        Raises:
            PageTooSmall: 페이지 설정 오류
        """
        canvas = self.canvas_factory()
        renderer = StatementRenderer(canvas, self.config)
        pages = renderer.render(statement)
        data = canvas.finish()
        return {
            "success": True,
            "pdf_data": base64.b64encode(data).decode("ascii"),
            "total_pages": len(pages),
            "filename": filename,
            "message": f"{statement.header.title} PDF generated successfully",
        }

    def _stamp(self) -> str:
        return now_kwt().strftime("%Y-%m-%d")

    def ledger_pdf(self, account: Account, vouchers: list[Voucher], date_range: DateRange) -> dict[str, Any]:
        """단일 계정 원장 PDF"""
        ledger = compute_ledger(vouchers, LedgerScope.for_account(account.id, account.name))
        statement = ledger_statement(account, ledger, date_range)
        filename = f"ledger_{account.account_no}_{_slug(account.name)}_{self._stamp()}.pdf"
        return self.render(statement, filename)

    def group_ledger_pdf(
        self,
        account_type: str,
        accounts: list[Account],
        vouchers: list[Voucher],
        date_range: DateRange,
    ) -> dict[str, Any]:
        """계정 유형 전체 원장 PDF"""
        members = sort_accounts(a for a in accounts if a.type == account_type)
        ledger = compute_ledger(vouchers, LedgerScope.for_type(account_type, [a.id for a in members]))
        statement = group_ledger_statement(account_type, members, ledger, date_range)
        return self.render(statement, f"{_slug(account_type)}_ledger_{self._stamp()}.pdf")

    def balances_pdf(
        self,
        account_type: str,
        accounts: list[Account],
        vouchers: list[Voucher],
        date_range: DateRange,
    ) -> dict[str, Any]:
        """계정별 잔액 PDF"""
        group = self.ledger_service.group_summary(account_type, accounts, vouchers, date_range)
        statement = balances_statement(group, {a.id: a for a in accounts}, date_range)
        return self.render(statement, f"{_slug(account_type)}_balances_{self._stamp()}.pdf")

    def locker_pdf(self, accounts: list[Account], vouchers: list[Voucher], date_range: DateRange) -> dict[str, Any]:
        """금고 금 원장 PDF"""
        ledger = self.ledger_service.locker_ledger(accounts, vouchers)
        statement = locker_statement(ledger, {a.id: a for a in accounts}, date_range)
        return self.render(statement, f"locker_ledger_{self._stamp()}.pdf")

    def type_summary_pdf(self, accounts: list[Account], vouchers: list[Voucher], date_range: DateRange) -> dict[str, Any]:
        """계정 유형별 요약 PDF"""
        report = self.ledger_service.type_summary(accounts, vouchers, date_range)
        statement = type_summary_statement(report)
        return self.render(statement, f"type_summary_{self._stamp()}.pdf")

    def open_balance_pdf(self, accounts: list[Account], vouchers: list[Voucher], date_range: DateRange) -> dict[str, Any]:
        """시세 고정 원장 PDF"""
        ledger = self.ledger_service.open_balance_ledger(accounts, vouchers)
        statement = open_balance_statement(ledger, {a.id: a for a in accounts}, date_range)
        return self.render(statement, f"open_balance_ledger_{self._stamp()}.pdf")
