"""
어댑터 레이어

외부 드로잉/출력 수단(PDF 등)과의 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import ICanvas

__all__ = [
    # Interfaces
    "ICanvas",
]
