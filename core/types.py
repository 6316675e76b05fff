"""
타입 정의 모듈

Enum, Dataclass 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class ReportKind(str, Enum):
    """보고서 종류

    config/report.yaml 의 header_sections 키와 동일.
    """

    LEDGER = "ledger"  # 단일 계정 원장
    GROUP_LEDGER = "group_ledger"  # 계정 유형 전체 원장
    LOCKER_LEDGER = "locker_ledger"  # 금고 금 원장
    OPEN_BALANCE = "open_balance"  # 시세 고정 원장
    BALANCES = "balances"  # 계정별 잔액
    TYPE_SUMMARY = "type_summary"  # 유형별 요약


class ScopeKind(str, Enum):
    """원장 범위 종류"""

    ACCOUNT = "ACCOUNT"
    ACCOUNT_TYPE = "ACCOUNT_TYPE"


@dataclass(frozen=True)
class LedgerScope:
    """원장 범위 (불변)

    단일 계정 또는 같은 유형의 계정 묶음.
    account_ids 에 포함된 계정의 전표만 원장에 반영된다.
    """

    kind: str
    account_ids: frozenset[str]
    account_type: str | None = None
    label: str = ""

    @classmethod
    def for_account(cls, account_id: str, label: str = "") -> "LedgerScope":
        """단일 계정 범위 생성"""
        return cls(
            kind=ScopeKind.ACCOUNT.value,
            account_ids=frozenset({account_id}),
            label=label,
        )

    @classmethod
    def for_type(
        cls,
        account_type: str | Enum,
        account_ids: Iterable[str],
    ) -> "LedgerScope":
        """계정 유형 범위 생성

        Enum 또는 문자열 모두 허용
        """
        type_value = account_type.value if isinstance(account_type, Enum) else account_type
        return cls(
            kind=ScopeKind.ACCOUNT_TYPE.value,
            account_ids=frozenset(account_ids),
            account_type=type_value,
            label=f"All {type_value} Accounts",
        )

    def includes(self, account_id: str) -> bool:
        """계정이 범위에 포함되는지 여부"""
        return account_id in self.account_ids
