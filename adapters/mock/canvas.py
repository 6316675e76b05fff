"""
Mock 캔버스

테스트용 Mock Canvas.
ICanvas Protocol 준수.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DrawCall:
    """드로잉 호출 기록"""

    op: str  # text | rect | line
    page: int
    args: dict[str, Any] = field(default_factory=dict)


class MockCanvas:
    """Mock 캔버스

    ICanvas Protocol 구현.
    모든 드로잉 호출을 기록하여 테스트에서 검증 가능.
    텍스트 폭은 글자 수 × size × char_width_ratio 로 계산 (폰트 무관).

    사용 예시:
    ```python
    canvas = MockCanvas()
    renderer = StatementRenderer(canvas, config)
    renderer.render(statement)

    assert canvas.page_count == 2
    assert "Page 1 of 2" in canvas.texts(page=1)
    ```
    """

    def __init__(self, char_width_ratio: float = 0.5):
        self.char_width_ratio = char_width_ratio
        self.pages: list[tuple[float, float]] = []
        self.calls: list[DrawCall] = []
        self.finished = False

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def _record(self, op: str, **args: Any) -> None:
        if not self.pages:
            raise RuntimeError("new_page() 호출 전에 그릴 수 없습니다")
        self.calls.append(DrawCall(op=op, page=len(self.pages), args=args))

    def new_page(self, width: float, height: float) -> None:
        self.pages.append((width, height))

    def draw_text(
        self,
        content: str,
        x: float,
        y: float,
        size: float,
        weight: str = "normal",
        color: str = "#000000",
    ) -> None:
        self._record("text", content=content, x=x, y=y, size=size, weight=weight, color=color)

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
        self._record(
            "rect", x=x, y=y, w=w, h=h,
            fill_color=fill_color, stroke_color=stroke_color, stroke_width=stroke_width,
        )

    def draw_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        color: str = "#000000",
        thickness: float = 1,
    ) -> None:
        self._record("line", start=start, end=end, color=color, thickness=thickness)

    def measure_text_width(self, content: str, size: float, weight: str = "normal") -> float:
        return len(content) * size * self.char_width_ratio

    def finish(self) -> bytes:
        self.finished = True
        return f"MOCK-PDF pages={self.page_count}".encode()

    # -------------------------------------------------------------------------
    # 검증 헬퍼
    # -------------------------------------------------------------------------

    def calls_on(self, page: int, op: str | None = None) -> list[DrawCall]:
        """특정 페이지의 호출 기록"""
        return [
            c for c in self.calls
            if c.page == page and (op is None or c.op == op)
        ]

    def texts(self, page: int | None = None) -> list[str]:
        """출력된 텍스트 목록 (page=None 이면 전체)"""
        return [
            c.args["content"] for c in self.calls
            if c.op == "text" and (page is None or c.page == page)
        ]

    def find_text(self, content: str) -> list[DrawCall]:
        """내용이 정확히 일치하는 텍스트 호출"""
        return [c for c in self.calls if c.op == "text" and c.args["content"] == content]
