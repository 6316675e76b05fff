"""
reportlab 캔버스

ICanvas Protocol 구현. reportlab.pdfgen.canvas 로 PDF 바이트를 만든다.
기본 폰트는 Helvetica / Helvetica-Bold (내장 Type1, 임베딩 불필요).
"""

import io
import logging

from reportlab.lib import colors
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)

FONT_NORMAL = "Helvetica"
FONT_BOLD = "Helvetica-Bold"


def _font(weight: str) -> str:
    return FONT_BOLD if weight == "bold" else FONT_NORMAL


class ReportLabCanvas:
    """reportlab 기반 PDF 캔버스

    사용 예시:
    ```python
    pdf = ReportLabCanvas(title="Account Ledger Statement")
    pdf.new_page(841.89, 595.28)
    pdf.draw_text("BLOUDAN JEWELLERY", 50, 535, 24, "bold", "#1E40AF")
    data = pdf.finish()  # b"%PDF-..."
    ```
    """

    def __init__(self, title: str | None = None):
        self._buffer = io.BytesIO()
        self._canvas: canvas.Canvas | None = None
        self._title = title
        self._page_open = False
        self.page_count = 0

    def _require_canvas(self) -> canvas.Canvas:
        if self._canvas is None:
            raise RuntimeError("new_page() 호출 전에 그릴 수 없습니다")
        return self._canvas

    def new_page(self, width: float, height: float) -> None:
        if self._canvas is None:
            self._canvas = canvas.Canvas(self._buffer, pagesize=(width, height))
            if self._title:
                self._canvas.setTitle(self._title)
        elif self._page_open:
            self._canvas.showPage()
            self._canvas.setPageSize((width, height))
        self._page_open = True
        self.page_count += 1

    def draw_text(
        self,
        content: str,
        x: float,
        y: float,
        size: float,
        weight: str = "normal",
        color: str = "#000000",
    ) -> None:
        c = self._require_canvas()
        c.setFont(_font(weight), size)
        c.setFillColor(colors.HexColor(color))
        c.drawString(x, y, content)

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
        c = self._require_canvas()
        stroke = stroke_color is not None and stroke_width > 0
        if fill_color is not None:
            c.setFillColor(colors.HexColor(fill_color))
        if stroke:
            c.setStrokeColor(colors.HexColor(stroke_color))
            c.setLineWidth(stroke_width)
        c.rect(x, y, w, h, stroke=1 if stroke else 0, fill=1 if fill_color else 0)

    def draw_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        color: str = "#000000",
        thickness: float = 1,
    ) -> None:
        c = self._require_canvas()
        c.setStrokeColor(colors.HexColor(color))
        c.setLineWidth(thickness)
        c.line(start[0], start[1], end[0], end[1])

    def measure_text_width(self, content: str, size: float, weight: str = "normal") -> float:
        return stringWidth(content, _font(weight), size)

    def finish(self) -> bytes:
        """PDF 저장 후 바이트 반환

        페이지를 하나도 만들지 않았으면 빈 A4 가로 페이지 1장.
        """
        if self._canvas is None:
            self.new_page(841.89, 595.28)
        assert self._canvas is not None
        self._canvas.save()
        data = self._buffer.getvalue()
        logger.debug(f"PDF 생성 완료: pages={self.page_count}, bytes={len(data)}")
        return data
