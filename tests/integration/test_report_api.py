"""
Web API 통합 테스트

FastAPI TestClient 로 라우트 → 서비스 → core 전체 경로를 검증.
PDF 는 MockCanvas 로 렌더링하여 페이지 수와 출력 텍스트를 확인.
"""

import base64

import pytest
from fastapi.testclient import TestClient

from adapters.mock import MockCanvas
from core.config.loader import ReportConfig
from web.app import app
from web.dependencies import get_report_service
from web.services.report_service import ReportService

ACCOUNTS = [
    {"id": "m1", "account_no": 1, "name": "Al Noor Gold", "type": "Market", "phone": "5000"},
    {"id": "m2", "account_no": 2, "name": "Gulf Bullion", "type": "Market"},
    {"id": "p1", "account_no": 1, "name": "Wedding Set", "type": "Project"},
]

VOUCHERS = [
    {"id": "v1", "date": "2024-01-10", "type": "INV", "account_id": "m1", "gold": "10", "kwd": "5"},
    {"id": "v2", "date": "2024-01-25", "type": "REC", "account_id": "m1", "gold": "4", "kwd": "1"},
    {"id": "v3", "date": "2024-02-01", "type": "GFV", "account_id": "m1", "gold": "3", "kwd": "2"},
    {"id": "v4", "date": "2024-02-20", "type": "Alloy", "account_id": "m1", "gold": "1", "kwd": "1"},
    {"id": "v5", "date": "2024-03-05", "type": "REC", "account_id": "m1", "gold": "2", "kwd": "2"},
    {"id": "v6", "date": "2024-02-02", "type": "REC", "account_id": "m2", "gold": "5", "kwd": "0",
     "payment_method": "cheque"},
    {"id": "v7", "date": "2024-02-03", "type": "INV", "account_id": "p1", "gold": "7"},
]


@pytest.fixture
def canvases() -> list[MockCanvas]:
    return []


@pytest.fixture
def client(canvases: list[MockCanvas]):
    """MockCanvas 를 쓰는 ReportService 로 교체한 클라이언트"""

    def _factory() -> MockCanvas:
        canvas = MockCanvas()
        canvases.append(canvas)
        return canvas

    app.dependency_overrides[get_report_service] = lambda: ReportService(ReportConfig(), canvas_factory=_factory)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestHealth:
    """헬스 체크"""

    def test_health(self, client: TestClient) -> None:
        """상태와 회사명"""
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["company"] == "BLOUDAN JEWELLERY"


class TestLedgerApi:
    """원장 계산 API"""

    def test_compute(self, client: TestClient) -> None:
        """단일 계정 누적 잔액"""
        response = client.post("/api/ledger/compute", json={"vouchers": VOUCHERS, "account_id": "m1"})

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 5
        assert data["entries"][0]["type_label"] == "Invoice"
        assert data["final_balance"] == {"gold": "8.000", "kwd": "1.000"}

    def test_statement_window(self, client: TestClient) -> None:
        """2월 기간 명세"""
        response = client.post("/api/ledger/statement", json={
            "vouchers": VOUCHERS,
            "account_id": "m1",
            "date_range": {"start": "2024-02-01", "end": "2024-02-29"},
        })

        assert response.status_code == 200
        data = response.json()
        assert data["opening"] == {"gold": "6.000", "kwd": "4.000"}
        assert data["closing"] == {"gold": "10.000", "kwd": "3.000"}
        assert data["transaction_count"] == 2
        assert data["rows"][0]["is_opening_balance"] is True
        assert data["rows"][-1]["is_closing_balance"] is True

    def test_unknown_voucher_type(self, client: TestClient) -> None:
        """알 수 없는 유형은 422, 유형과 전표 ID 포함"""
        bad = VOUCHERS + [{"id": "bad-1", "date": "2024-01-01", "type": "XYZ", "account_id": "m1"}]

        response = client.post("/api/ledger/compute", json={"vouchers": bad})

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["error"] == "UnknownVoucherType"
        assert detail["extra"] == {"voucher_type": "XYZ", "voucher_id": "bad-1"}

    def test_negative_amount_rejected(self, client: TestClient) -> None:
        """음수 금액은 요청 검증 단계에서 422"""
        bad = [{"id": "n1", "date": "2024-01-01", "type": "INV", "account_id": "m1", "gold": "-1"}]

        response = client.post("/api/ledger/compute", json={"vouchers": bad})

        assert response.status_code == 422

    def test_aggregate(self, client: TestClient) -> None:
        """Market 유형 집계"""
        response = client.post("/api/ledger/aggregate", json={
            "account_type": "Market",
            "accounts": ACCOUNTS,
            "vouchers": VOUCHERS,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["total_accounts"] == 2
        assert data["total_gold"] == "3.000"  # 8 + (-5)
        assert data["total_transactions"] == 6
        assert [a["account_no"] for a in data["accounts"]] == [1, 2]

    def test_aggregate_quiet_account_keeps_balance(self, client: TestClient) -> None:
        """기간 내 전표가 없는 계정도 이월 잔액으로 집계"""
        response = client.post("/api/ledger/aggregate", json={
            "account_type": "Market",
            "accounts": ACCOUNTS,
            "vouchers": VOUCHERS,
            "date_range": {"start": "2024-03-01", "end": "2024-03-31"},
        })

        assert response.status_code == 200
        data = response.json()
        m1, m2 = data["accounts"]
        assert m1["gold_balance"] == "8.000"
        assert m1["transaction_count"] == 1
        assert m2["gold_balance"] == "-5.000"  # 2월 수표 REC 이월
        assert m2["transaction_count"] == 0
        assert data["total_gold"] == "3.000"
        assert data["total_transactions"] == 1
        assert data["active_accounts"] == 1

    def test_type_summary(self, client: TestClient) -> None:
        """모든 유형, 고정 순서"""
        response = client.post("/api/ledger/type-summary", json={"accounts": ACCOUNTS, "vouchers": VOUCHERS})

        assert response.status_code == 200
        data = response.json()
        assert [r["account_type"] for r in data["rows"]] == [
            "Market", "Casting", "Faceting", "Project", "Gold Fixing",
        ]
        assert data["total_accounts"] == 3
        # 금고: m1 INV -10, REC +4, REC +2 / m2 수표 0 / p1 INV -7
        assert data["locker_total_gold"] == "-11.000"

    def test_open_balance(self, client: TestClient) -> None:
        """시세 고정 명세: 1월 REC 이월, 2월 GFV, INV 제외"""
        fixing = [
            {"id": "r1", "date": "2024-01-10", "type": "REC", "account_id": "m1", "gold": "5",
             "gold_rate": "20", "fixing_amount": "100"},
            {"id": "g1", "date": "2024-02-05", "type": "GFV", "account_id": "p1", "gold": "2", "kwd": "40"},
            {"id": "i1", "date": "2024-02-06", "type": "INV", "account_id": "m2", "gold": "9"},
        ]

        response = client.post("/api/ledger/open-balance", json={
            "accounts": ACCOUNTS,
            "vouchers": fixing,
            "date_range": {"start": "2024-02-01", "end": "2024-02-29"},
        })

        assert response.status_code == 200
        data = response.json()
        assert data["opening"] == {"gold": "5.000", "kwd": "100.000"}
        assert data["closing"] == {"gold": "3.000", "kwd": "60.000"}
        assert [r["voucher_id"] for r in data["rows"]] == ["opening-balance", "g1", "closing-balance"]
        assert data["summary"] == {"market_rec": 0, "gfv": 1, "total": 1}
        assert data["totals"]["kwd_credit"] == "40.000"

    def test_open_balance_keeps_gold_rate(self, client: TestClient) -> None:
        """전체 기간: 시세 고정 REC 행에 단가"""
        fixing = [
            {"id": "r1", "date": "2024-01-10", "type": "REC", "account_id": "m1", "gold": "5",
             "gold_rate": "20", "fixing_amount": "100"},
        ]

        response = client.post("/api/ledger/open-balance", json={"accounts": ACCOUNTS, "vouchers": fixing})

        assert response.status_code == 200
        rows = response.json()["rows"]
        assert rows[1]["gold_rate"] == "20.000"
        assert rows[0]["gold_rate"] is None

    def test_locker_unknown_account(self, client: TestClient) -> None:
        """계정 목록에 없는 전표는 422"""
        response = client.post("/api/ledger/locker", json={"accounts": ACCOUNTS[:1], "vouchers": VOUCHERS})

        assert response.status_code == 422
        assert response.json()["detail"]["error"] == "UnknownAccount"


class TestReportApi:
    """PDF 보고서 API"""

    def test_ledger_pdf(self, client: TestClient, canvases: list[MockCanvas]) -> None:
        """Base64 PDF 와 페이지 수"""
        response = client.post("/api/reports/ledger-pdf", json={
            "account": ACCOUNTS[0],
            "vouchers": VOUCHERS,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["total_pages"] == 1
        assert base64.b64decode(data["pdf_data"]) == b"MOCK-PDF pages=1"
        assert data["filename"].startswith("ledger_1_Al_Noor_Gold_")
        assert "Account No: 1" in canvases[0].texts()

    def test_group_ledger_pdf(self, client: TestClient, canvases: list[MockCanvas]) -> None:
        """유형 전체 원장"""
        response = client.post("/api/reports/group-ledger-pdf", json={
            "account_type": "Market",
            "accounts": ACCOUNTS,
            "vouchers": VOUCHERS,
        })

        assert response.status_code == 200
        assert "All Market Accounts - Ledger Statement" in canvases[0].texts()

    def test_balances_pdf_gold_only(self, client: TestClient, canvases: list[MockCanvas]) -> None:
        """Project 잔액 보고서는 Amount 컬럼 없음"""
        response = client.post("/api/reports/balances-pdf", json={
            "account_type": "Project",
            "accounts": ACCOUNTS,
            "vouchers": VOUCHERS,
        })

        assert response.status_code == 200
        texts = canvases[0].texts()
        assert "Gold Balance" in texts
        assert "Amount Balance" not in texts

    def test_locker_and_type_summary_pdf(self, client: TestClient) -> None:
        """금고 원장, 유형 요약 PDF"""
        body = {"accounts": ACCOUNTS, "vouchers": VOUCHERS}

        assert client.post("/api/reports/locker-pdf", json=body).status_code == 200
        assert client.post("/api/reports/type-summary-pdf", json=body).status_code == 200

    def test_open_balance_pdf(self, client: TestClient, canvases: list[MockCanvas]) -> None:
        """시세 고정 원장 PDF"""
        fixing = [
            {"id": "r1", "date": "2024-01-10", "type": "REC", "account_id": "m1", "gold": "5",
             "gold_rate": "20", "fixing_amount": "100"},
            {"id": "g1", "date": "2024-02-05", "type": "GFV", "account_id": "p1", "gold": "2", "kwd": "40"},
        ]

        response = client.post("/api/reports/open-balance-pdf", json={"accounts": ACCOUNTS, "vouchers": fixing})

        assert response.status_code == 200
        assert response.json()["filename"].startswith("open_balance_ledger_")
        texts = canvases[0].texts()
        assert "Open Balance Ledger" in texts
        assert "20.000" in texts

    def test_page_too_small(self, client: TestClient) -> None:
        """페이지 설정 오류는 500"""
        config = ReportConfig(header_sections={"ledger": 600})
        app.dependency_overrides[get_report_service] = lambda: ReportService(config, canvas_factory=MockCanvas)

        response = client.post("/api/reports/ledger-pdf", json={"account": ACCOUNTS[0], "vouchers": VOUCHERS})

        assert response.status_code == 500
        assert response.json()["detail"]["error"] == "PageTooSmall"

    def test_real_pdf(self, client: TestClient) -> None:
        """reportlab 캔버스로 실제 PDF 생성"""
        app.dependency_overrides[get_report_service] = lambda: ReportService(ReportConfig())

        response = client.post("/api/reports/ledger-pdf", json={"account": ACCOUNTS[0], "vouchers": VOUCHERS})

        assert response.status_code == 200
        assert base64.b64decode(response.json()["pdf_data"]).startswith(b"%PDF")
