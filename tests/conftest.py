"""
pytest 공통 fixture 정의

원장/보고서 테스트용 계정, 전표, 설정 fixture
"""

import tempfile
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Callable

import pytest

from core.config.loader import ReportConfig, Settings
from core.ledger.models import Account, Voucher


@pytest.fixture(autouse=True)
def reset_settings() -> None:
    """테스트마다 Settings 싱글턴 초기화"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_report_config(temp_dir: Path) -> Path:
    """테스트용 report.yaml 파일 생성"""
    content = """# 테스트용 report.yaml
company_name: "TEST JEWELLERY"

page:
  width: 841.89
  height: 595.28
  margin: 30
  row_height: 18
  header_height: 40
  footer_height: 30

header_sections:
  ledger: 180
  balances: 110
"""
    path = temp_dir / "report.yaml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def report_config() -> ReportConfig:
    """기본 레이아웃 설정"""
    return ReportConfig()


@pytest.fixture
def market_account() -> Account:
    """Market 계정"""
    return Account(
        id="acc-market-1",
        account_no=1,
        name="Al Noor Gold",
        type="Market",
        phone="+965 5000 0001",
        cr_or_civil_id_no="CR-1001",
    )


@pytest.fixture
def project_account() -> Account:
    """Project 계정 (금 전용)"""
    return Account(id="acc-project-1", account_no=1, name="Wedding Set", type="Project")


@pytest.fixture
def make_voucher() -> Callable[..., Voucher]:
    """전표 생성 헬퍼

    사용 예:
        make_voucher("v1", "2024-01-05", "INV", gold="10", kwd="5")
    """

    def _make(
        voucher_id: str,
        on: str | date,
        voucher_type: str,
        gold: str = "0",
        kwd: str = "0",
        account_id: str = "acc-market-1",
        **kwargs,
    ) -> Voucher:
        return Voucher(
            id=voucher_id,
            date=date.fromisoformat(on) if isinstance(on, str) else on,
            type=voucher_type,
            account_id=account_id,
            gold=Decimal(gold),
            kwd=Decimal(kwd),
            **kwargs,
        )

    return _make


@pytest.fixture
def quarter_vouchers(make_voucher) -> list[Voucher]:
    """1월~3월에 걸친 전표 (기간 필터 테스트용)"""
    return [
        make_voucher("j1", "2024-01-10", "INV", gold="10", kwd="5"),
        make_voucher("j2", "2024-01-25", "REC", gold="4", kwd="1"),
        make_voucher("f1", "2024-02-01", "GFV", gold="3", kwd="2"),
        make_voucher("f2", "2024-02-20", "Alloy", gold="1", kwd="1"),
        make_voucher("m1", "2024-03-05", "REC", gold="2", kwd="2"),
    ]
