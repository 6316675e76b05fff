"""
core/ledger/aggregate.py 테스트

계정별 요약, 그룹 합계, 유형별 요약
"""

from datetime import date
from decimal import Decimal

import pytest

from core.ledger.aggregate import aggregate, summarize_account, summarize_types
from core.ledger.calculator import compute_ledger
from core.ledger.models import Account, Balance, LedgerEntry
from core.ledger.period import DateRange, apply_window
from core.types import LedgerScope


def _accounts() -> list[Account]:
    return [
        Account(id="c1", account_no=1, name="Caster One", type="Casting"),
        Account(id="c2", account_no=2, name="Caster Two", type="Casting"),
        Account(id="c3", account_no=3, name="Caster Three", type="Casting"),
    ]


@pytest.fixture
def casting_vouchers(make_voucher):
    return [
        make_voucher("v1", "2024-01-01", "INV", gold="10", kwd="5", account_id="c1"),
        make_voucher("v2", "2024-01-02", "REC", gold="4", kwd="5", account_id="c1"),
        make_voucher("v3", "2024-01-03", "REC", gold="2", kwd="3", account_id="c2"),
    ]


def _per_account(accounts, vouchers, date_range=None):
    return [
        (a, apply_window(compute_ledger(vouchers, LedgerScope.for_account(a.id)), date_range).windowed)
        for a in accounts
    ]


class TestAggregate:
    """aggregate() 테스트"""

    def test_totals(self, casting_vouchers) -> None:
        """합계 = 계정별 기말 잔액 합"""
        group = aggregate(_per_account(_accounts(), casting_vouchers))

        assert group.account_type == "Casting"
        assert group.total_gold == Decimal("6") + Decimal("-2")
        assert group.total_kwd == Decimal("0") + Decimal("-3")
        assert group.total_transactions == 3
        assert group.total_accounts == 3

    def test_predicate_counts(self, casting_vouchers) -> None:
        """양수 금, 양수 금액, 잔액 0, 활성 계정 수"""
        group = aggregate(_per_account(_accounts(), casting_vouchers))

        assert group.accounts_with_positive_gold == 1  # c1
        assert group.accounts_with_positive_kwd == 0
        assert group.accounts_with_zero_balance == 1  # c3
        assert group.active_accounts == 2

    def test_preserves_input_order(self, casting_vouchers) -> None:
        """입력 순서 유지 (재정렬하지 않음)"""
        accounts = list(reversed(_accounts()))

        group = aggregate(_per_account(accounts, casting_vouchers))

        assert [s.account_no for s in group.accounts] == [3, 2, 1]

    def test_empty_ledger_account(self) -> None:
        """전표 없는 계정은 잔액 0, 거래 0"""
        summary = summarize_account(_accounts()[0], [])

        assert summary.gold_balance == summary.kwd_balance == 0
        assert summary.transaction_count == 0
        assert not summary.is_active

    def test_synthetic_rows_not_counted(self) -> None:
        """합성 행은 거래 수에서 제외"""
        entries = [LedgerEntry.closing(Balance(Decimal("1"), Decimal("2")), None, "c1")]

        summary = summarize_account(_accounts()[0], entries)

        assert summary.transaction_count == 0
        assert summary.gold_balance == Decimal("1")

    def test_quiet_account_uses_carried_balance(self, make_voucher) -> None:
        """기간 내 전표가 없으면 기말 합성 행의 이월 잔액"""
        account = _accounts()[0]
        vouchers = [make_voucher("j1", "2024-01-05", "INV", gold="10", account_id="c1")]
        date_range = DateRange(date(2024, 2, 1), date(2024, 2, 29))
        window = apply_window(compute_ledger(vouchers, LedgerScope.for_account("c1")), date_range)
        entries = window.windowed + [LedgerEntry.closing(window.closing, date_range.end, "c1")]

        group = aggregate([(account, entries)])

        assert window.windowed == []
        assert group.accounts[0].gold_balance == Decimal("10")
        assert group.total_gold == Decimal("10")
        assert group.total_transactions == 0
        assert group.active_accounts == 0

    def test_mixed_types_rejected(self) -> None:
        """다른 유형이 섞이면 ValueError"""
        pairs = [
            (Account(id="a", account_no=1, name="A", type="Casting"), []),
            (Account(id="b", account_no=1, name="B", type="Market"), []),
        ]

        with pytest.raises(ValueError):
            aggregate(pairs)

    def test_no_accounts(self) -> None:
        """계정이 없으면 빈 그룹"""
        group = aggregate([])

        assert group.account_type is None
        assert group.total_accounts == 0
        assert group.total_gold == 0

    def test_window_applied(self, casting_vouchers) -> None:
        """기간 적용된 원장의 마지막 잔액 사용"""
        per_account = _per_account(_accounts(), casting_vouchers, DateRange(end=date(2024, 1, 1)))

        group = aggregate(per_account)

        assert group.total_gold == Decimal("10")
        assert group.total_transactions == 1

    def test_total_law(self, casting_vouchers) -> None:
        """total_gold == Σ 계정별 기말 금 잔액"""
        per_account = _per_account(_accounts(), casting_vouchers)

        group = aggregate(per_account)

        expected = sum((entries[-1].gold_balance for _, entries in per_account if entries), Decimal("0"))
        assert group.total_gold == expected


class TestSummarizeTypes:
    """summarize_types() 테스트"""

    def test_overall_totals(self, casting_vouchers) -> None:
        """여러 그룹 전체 합계"""
        casting = aggregate(_per_account(_accounts(), casting_vouchers))
        market = aggregate([
            (Account(id="m1", account_no=1, name="M", type="Market"), []),
        ])

        report = summarize_types([casting, market], {"Casting": Decimal("-4")})

        assert [r.account_type for r in report.rows] == ["Casting", "Market"]
        assert report.overall_gold == casting.total_gold
        assert report.total_accounts == 4
        assert report.total_active_accounts == 2
        assert report.total_transactions == 3
        assert report.locker_total_gold == Decimal("-4")
        assert report.rows[0].status == "Active"
        assert report.rows[1].status == "Inactive"
