"""
core/types.py 테스트

모든 Enum이 문자열 직렬화 가능하고, LedgerScope가 올바르게 동작하는지 확인
"""

import pytest

from core.ledger.types import AccountType
from core.types import LedgerScope, ReportKind, ScopeKind


class TestReportKind:
    """ReportKind 테스트"""

    def test_values(self) -> None:
        """설정 파일 키와 동일한 값"""
        assert ReportKind.LEDGER == "ledger"
        assert ReportKind.GROUP_LEDGER == "group_ledger"
        assert ReportKind.LOCKER_LEDGER == "locker_ledger"
        assert ReportKind.OPEN_BALANCE == "open_balance"
        assert ReportKind.BALANCES == "balances"
        assert ReportKind.TYPE_SUMMARY == "type_summary"


class TestLedgerScope:
    """LedgerScope 테스트"""

    def test_for_account(self) -> None:
        """단일 계정 범위"""
        scope = LedgerScope.for_account("a1", label="Al Noor")

        assert scope.kind == ScopeKind.ACCOUNT
        assert scope.account_ids == frozenset({"a1"})
        assert scope.account_type is None
        assert scope.label == "Al Noor"
        assert scope.includes("a1")
        assert not scope.includes("a2")

    def test_for_type_accepts_enum(self) -> None:
        """Enum 유형도 문자열로 저장"""
        scope = LedgerScope.for_type(AccountType.CASTING, ["c1", "c2"])

        assert scope.kind == ScopeKind.ACCOUNT_TYPE
        assert scope.account_type == "Casting"
        assert scope.label == "All Casting Accounts"
        assert scope.includes("c2")

    def test_frozen(self) -> None:
        """불변 객체"""
        scope = LedgerScope.for_account("a1")

        with pytest.raises(AttributeError):
            scope.label = "changed"  # type: ignore[misc]
