"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

from fastapi import Depends

from core.config.loader import Settings, get_settings
from web.services.ledger_service import LedgerService
from web.services.report_service import ReportService


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


def get_ledger_service() -> LedgerService:
    """원장 서비스 반환 (무상태)"""
    return LedgerService()


def get_report_service(
    settings: Settings = Depends(get_app_settings),
    ledger_service: LedgerService = Depends(get_ledger_service),
) -> ReportService:
    """보고서 서비스 반환

    테스트에서는 app.dependency_overrides 로 MockCanvas 기반 서비스로 교체.
    """
    return ReportService(settings.report, ledger_service=ledger_service)
