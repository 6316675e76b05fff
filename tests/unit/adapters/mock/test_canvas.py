"""
Mock 캔버스 테스트
"""

import pytest

from adapters.mock import MockCanvas


class TestMockCanvas:
    """MockCanvas 테스트"""

    def test_draw_before_page_fails(self) -> None:
        """new_page() 전 드로잉은 RuntimeError"""
        canvas = MockCanvas()

        with pytest.raises(RuntimeError):
            canvas.draw_text("x", 0, 0, 10)

    def test_records_calls_per_page(self) -> None:
        """페이지별 호출 기록"""
        canvas = MockCanvas()
        canvas.new_page(100, 100)
        canvas.draw_text("first", 1, 2, 10)
        canvas.new_page(100, 100)
        canvas.draw_rect(0, 0, 10, 10, fill_color="#FFFFFF")
        canvas.draw_line((0, 0), (1, 1))
        canvas.draw_text("second", 1, 2, 10, "bold")

        assert canvas.page_count == 2
        assert canvas.texts(page=1) == ["first"]
        assert canvas.texts() == ["first", "second"]
        assert [c.op for c in canvas.calls_on(2)] == ["rect", "line", "text"]
        assert len(canvas.calls_on(2, "rect")) == 1
        assert canvas.find_text("second")[0].args["weight"] == "bold"

    def test_measure_text_width(self) -> None:
        """글자 수 × 크기 × 비율"""
        assert MockCanvas(char_width_ratio=0.5).measure_text_width("abcd", 10) == 20

    def test_finish(self) -> None:
        """완료 표시와 바이트"""
        canvas = MockCanvas()
        canvas.new_page(10, 10)

        assert canvas.finish() == b"MOCK-PDF pages=1"
        assert canvas.finished
