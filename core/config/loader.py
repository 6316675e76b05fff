"""
설정 로더

report.yaml 로드 및 보고서 페이지 설정 생성
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from core.constants import Defaults, LayoutDefaults, PageSize, Paths
from core.types import ReportKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageGeometry:
    """페이지 기하 설정 (pt 단위)

    불변 데이터 구조로 설정 변경 방지
    """

    width: float = PageSize.A4_LANDSCAPE_WIDTH
    height: float = PageSize.A4_LANDSCAPE_HEIGHT
    margin: float = LayoutDefaults.MARGIN
    row_height: float = LayoutDefaults.ROW_HEIGHT
    header_height: float = LayoutDefaults.HEADER_HEIGHT
    footer_height: float = LayoutDefaults.FOOTER_HEIGHT
    table_inset: float = LayoutDefaults.TABLE_INSET

    @property
    def table_width(self) -> float:
        """테이블 전체 폭 (좌우 여백 + 안쪽 여백 제외)"""
        return self.width - 2 * self.margin - 2 * self.table_inset

    @property
    def table_x(self) -> float:
        """테이블 왼쪽 x 좌표"""
        return self.margin + self.table_inset


@dataclass(frozen=True)
class PageConfig:
    """보고서 1종의 페이지 설정

    header_section_height: 제목/계정 카드 등 테이블 위 영역 높이
    """

    geometry: PageGeometry
    header_section_height: float

    @property
    def table_start_y(self) -> float:
        return self.geometry.height - self.geometry.margin - self.header_section_height

    @property
    def table_end_y(self) -> float:
        return self.geometry.margin + self.geometry.footer_height

    @property
    def rows_per_page(self) -> int:
        """페이지당 행 수 (내림)

        음수/0 이 될 수 있으며 검증은 paginator 가 한다.
        """
        usable = self.table_start_y - self.table_end_y - self.geometry.header_height
        if self.geometry.row_height <= 0:
            return 0
        return int(usable // self.geometry.row_height)


@dataclass(frozen=True)
class ReportConfig:
    """보고서 설정 (report.yaml에서 로드)"""

    company_name: str = Defaults.COMPANY_NAME
    page: PageGeometry = field(default_factory=PageGeometry)
    header_sections: dict[str, float] = field(
        default_factory=lambda: dict(LayoutDefaults.HEADER_SECTIONS)
    )

    def page_config(self, kind: ReportKind | str) -> PageConfig:
        """보고서 종류별 페이지 설정

        Raises:
            KeyError: header_sections 에 없는 보고서 종류
        """
        key = kind.value if isinstance(kind, ReportKind) else kind
        return PageConfig(
            geometry=self.page,
            header_section_height=self.header_sections[key],
        )


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _parse_page(data: Any) -> PageGeometry:
    if data is None:
        return PageGeometry()
    if not isinstance(data, dict):
        raise ConfigLoadError("report.yaml의 'page' 섹션은 매핑이어야 합니다")

    defaults = PageGeometry()
    values: dict[str, float] = {}
    for name in ("width", "height", "margin", "row_height", "header_height", "footer_height", "table_inset"):
        raw = data.get(name, getattr(defaults, name))
        try:
            values[name] = float(raw)
        except (TypeError, ValueError) as e:
            raise ConfigLoadError(
                f"report.yaml의 page.{name} 값이 숫자가 아닙니다: {raw!r}"
            ) from e
    return PageGeometry(**values)


def _parse_header_sections(data: Any) -> dict[str, float]:
    sections = dict(LayoutDefaults.HEADER_SECTIONS)
    if data is None:
        return sections
    if not isinstance(data, dict):
        raise ConfigLoadError("report.yaml의 'header_sections' 섹션은 매핑이어야 합니다")

    for name, raw in data.items():
        try:
            sections[str(name)] = float(raw)
        except (TypeError, ValueError) as e:
            raise ConfigLoadError(
                f"report.yaml의 header_sections.{name} 값이 숫자가 아닙니다: {raw!r}"
            ) from e
    return sections


def load_report_config(path: Path | None = None) -> ReportConfig:
    """report.yaml 파일 로드

    Args:
        path: report.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        ReportConfig 인스턴스 (파일이 없으면 기본값)

    Raises:
        ConfigLoadError: 형식이 잘못된 경우
    """
    if path is None:
        path = Paths.REPORT_CONFIG_FILE

    if not path.exists():
        logger.info(f"report.yaml 없음, 기본 레이아웃 사용: {path}")
        return ReportConfig()

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"report.yaml 파싱 실패: {e}") from e

    if data is None:
        return ReportConfig()
    if not isinstance(data, dict):
        raise ConfigLoadError("report.yaml 최상위는 매핑이어야 합니다")

    return ReportConfig(
        company_name=str(data.get("company_name") or Defaults.COMPANY_NAME),
        page=_parse_page(data.get("page")),
        header_sections=_parse_header_sections(data.get("header_sections")),
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    report.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _report: ReportConfig | None = None

    def __new__(cls, config_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config_path: Path | None = None) -> None:
        if self._report is None:
            self._report = load_report_config(config_path)

    @property
    def report(self) -> ReportConfig:
        """보고서 설정"""
        assert self._report is not None
        return self._report

    @property
    def company_name(self) -> str:
        """보고서 제목에 표시할 회사명"""
        return self.report.company_name

    def page_config(self, kind: ReportKind | str) -> PageConfig:
        """보고서 종류별 페이지 설정"""
        return self.report.page_config(kind)

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._report = None


def get_settings(config_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        config_path: report.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(config_path)
