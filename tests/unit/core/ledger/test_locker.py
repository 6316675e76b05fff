"""
core/ledger/locker.py 테스트

계정 유형 × 전표 유형별 금고 금 변동, 누적 원장
"""

from decimal import Decimal

import pytest

from core.ledger.locker import compute_locker_ledger, locker_change, locker_gold_by_type
from core.ledger.models import Account
from core.ledger.rules import UnknownVoucherType


@pytest.fixture
def accounts() -> dict[str, Account]:
    return {
        "m": Account(id="m", account_no=1, name="Market One", type="Market"),
        "c": Account(id="c", account_no=1, name="Caster", type="Casting"),
        "p": Account(id="p", account_no=1, name="Project X", type="Project"),
        "g": Account(id="g", account_no=1, name="Fixer", type="Gold Fixing"),
    }


class TestLockerChange:
    """locker_change() 테스트"""

    @pytest.mark.parametrize(
        "account_id, voucher_type, expected",
        [
            ("m", "INV", "-5"),
            ("m", "REC", "5"),
            ("m", "GFV", "0"),
            ("c", "INV", "-5"),
            ("c", "REC", "5"),
            ("c", "Alloy", "0"),
            ("p", "INV", "-5"),
            ("p", "REC", "5"),
            ("g", "INV", "0"),
            ("g", "REC", "5"),
            ("g", "GFV", "0"),
        ],
    )
    def test_rule_table(self, accounts, make_voucher, account_id, voucher_type, expected) -> None:
        """계정 유형별 규칙표"""
        voucher = make_voucher("v1", "2024-01-01", voucher_type, gold="5", account_id=account_id)

        assert locker_change(voucher, accounts[account_id]) == Decimal(expected)

    def test_market_cheque_receipt_is_zero(self, accounts, make_voucher) -> None:
        """Market 수표 결제 수령은 금고 변동 없음 (대소문자 무관)"""
        voucher = make_voucher("v1", "2024-01-01", "REC", gold="5", account_id="m", payment_method="Cheque")

        assert locker_change(voucher, accounts["m"]) == 0

    def test_cheque_only_matters_for_market(self, accounts, make_voucher) -> None:
        """Casting 계정은 결제 수단과 무관"""
        voucher = make_voucher("v1", "2024-01-01", "REC", gold="5", account_id="c", payment_method="cheque")

        assert locker_change(voucher, accounts["c"]) == Decimal("5")

    def test_unknown_voucher_type(self, accounts, make_voucher) -> None:
        """알 수 없는 전표 유형은 예외"""
        voucher = make_voucher("v9", "2024-01-01", "XYZ", gold="5", account_id="g")

        with pytest.raises(UnknownVoucherType):
            locker_change(voucher, accounts["g"])


class TestComputeLockerLedger:
    """compute_locker_ledger() 테스트"""

    def test_running_balance(self, accounts, make_voucher) -> None:
        """날짜순 누적, 금 컬럼만 사용"""
        vouchers = [
            make_voucher("v2", "2024-01-02", "INV", gold="3", kwd="9", account_id="c"),
            make_voucher("v1", "2024-01-01", "REC", gold="10", kwd="9", account_id="m"),
        ]

        ledger = compute_locker_ledger(vouchers, accounts)

        assert [e.voucher_id for e in ledger] == ["v1", "v2"]
        assert ledger[0].gold_debit == Decimal("10")
        assert ledger[1].gold_credit == Decimal("3")
        assert ledger[1].gold_balance == Decimal("7")
        assert all(e.kwd_debit == e.kwd_credit == e.kwd_balance == 0 for e in ledger)

    def test_description_has_account_name(self, accounts, make_voucher) -> None:
        """설명 = 계정명 - 전표 설명"""
        vouchers = [make_voucher("v1", "2024-01-01", "REC", gold="1", account_id="m", description="Bar")]

        ledger = compute_locker_ledger(vouchers, accounts)

        assert ledger[0].description == "Market One - Bar"

    def test_zero_change_skipped(self, accounts, make_voucher) -> None:
        """변동 0 전표는 기본적으로 제외, 잔액은 유지"""
        vouchers = [
            make_voucher("v1", "2024-01-01", "REC", gold="2", account_id="g"),
            make_voucher("v2", "2024-01-02", "GFV", gold="7", account_id="g"),
            make_voucher("v3", "2024-01-03", "REC", gold="1", account_id="g"),
        ]

        assert [e.voucher_id for e in compute_locker_ledger(vouchers, accounts)] == ["v1", "v3"]
        with_zero = compute_locker_ledger(vouchers, accounts, include_zero=True)
        assert [e.voucher_id for e in with_zero] == ["v1", "v2", "v3"]
        assert with_zero[1].gold_balance == Decimal("2")

    def test_unknown_account(self, accounts, make_voucher) -> None:
        """계정 목록에 없는 전표는 KeyError"""
        vouchers = [make_voucher("v1", "2024-01-01", "REC", gold="1", account_id="missing")]

        with pytest.raises(KeyError):
            compute_locker_ledger(vouchers, accounts)


class TestLockerGoldByType:
    """locker_gold_by_type() 테스트"""

    def test_totals_per_type(self, accounts, make_voucher) -> None:
        """유형별 합계"""
        vouchers = [
            make_voucher("v1", "2024-01-01", "REC", gold="4", account_id="m"),
            make_voucher("v2", "2024-01-02", "INV", gold="1", account_id="m"),
            make_voucher("v3", "2024-01-03", "INV", gold="2", account_id="c"),
        ]

        totals = locker_gold_by_type(vouchers, accounts)

        assert totals == {"Market": Decimal("3"), "Casting": Decimal("-2")}
