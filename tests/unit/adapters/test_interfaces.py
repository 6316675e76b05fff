"""
Protocol 인터페이스 테스트

Protocol 타입 검증 및 구현 확인.
"""

from adapters.interfaces import ICanvas
from adapters.mock import MockCanvas
from adapters.pdf import ReportLabCanvas


class TestICanvas:
    """ICanvas Protocol 테스트"""

    def test_mock_canvas_implements_protocol(self) -> None:
        """Mock 캔버스가 Protocol을 구현하는지 확인"""
        assert isinstance(MockCanvas(), ICanvas)

    def test_reportlab_canvas_implements_protocol(self) -> None:
        """reportlab 캔버스가 Protocol을 구현하는지 확인"""
        assert isinstance(ReportLabCanvas(), ICanvas)

    def test_protocol_has_required_methods(self) -> None:
        """Protocol에 필수 메서드가 정의되어 있는지 확인"""
        required_methods = [
            "new_page",
            "draw_text",
            "draw_rect",
            "draw_line",
            "measure_text_width",
            "finish",
        ]

        for method_name in required_methods:
            assert hasattr(ICanvas, method_name), f"Missing method: {method_name}"

    def test_plain_object_is_not_canvas(self) -> None:
        """메서드가 없는 객체는 Protocol 불일치"""
        assert not isinstance(object(), ICanvas)
