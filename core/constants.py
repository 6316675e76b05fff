"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from decimal import Decimal
from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → goldledger/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


# 금액 정밀도 (소수점 3자리 고정)
AMOUNT_QUANT: Decimal = Decimal("0.001")


class Defaults:
    """기본값 상수"""

    COMPANY_NAME: str = "BLOUDAN JEWELLERY"

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000


class PageSize:
    """A4 가로 페이지 크기 (pt)"""

    A4_LANDSCAPE_WIDTH: float = 841.89
    A4_LANDSCAPE_HEIGHT: float = 595.28


class LayoutDefaults:
    """보고서 레이아웃 기본값

    config/report.yaml 이 없을 때 사용.
    """

    MARGIN: float = 30
    ROW_HEIGHT: float = 18
    HEADER_HEIGHT: float = 40  # 테이블 헤더 밴드
    FOOTER_HEIGHT: float = 30
    TABLE_INSET: float = 20  # 컨테이너 안쪽 여백 (좌우 각각)

    # 보고서 종류별 상단 헤더 영역 높이
    HEADER_SECTIONS: dict[str, float] = {
        "ledger": 180,
        "group_ledger": 120,
        "locker_ledger": 120,
        "open_balance": 120,
        "balances": 110,
        "type_summary": 120,
    }


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    REPORT_CONFIG_FILE: Path = CONFIG_DIR / "report.yaml"
