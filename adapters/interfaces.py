"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ICanvas(Protocol):
    """보고서 드로잉 캔버스 인터페이스

    좌표계는 PDF와 같다 (원점 왼쪽 아래, pt 단위).
    색상은 "#RRGGBB" 문자열, weight 는 "normal" 또는 "bold".
    """

    def new_page(self, width: float, height: float) -> None:
        """새 페이지 시작

        이후 드로잉 호출은 이 페이지에 그려진다.
        """
        ...

    def draw_text(
        self,
        content: str,
        x: float,
        y: float,
        size: float,
        weight: str = "normal",
        color: str = "#000000",
    ) -> None:
        """텍스트 출력 (x, y 는 베이스라인 왼쪽)"""
        ...

    def draw_rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        fill_color: str | None = None,
        stroke_color: str | None = None,
        stroke_width: float = 0,
    ) -> None:
        """사각형 (x, y 는 왼쪽 아래 꼭짓점)"""
        ...

    def draw_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        color: str = "#000000",
        thickness: float = 1,
    ) -> None:
        """직선"""
        ...

    def measure_text_width(self, content: str, size: float, weight: str = "normal") -> float:
        """텍스트 폭 (정렬 계산용)"""
        ...

    def finish(self) -> bytes:
        """문서 완료 후 바이트 반환 (PDF 등)"""
        ...
