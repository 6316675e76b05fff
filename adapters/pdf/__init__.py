"""
PDF 어댑터

ICanvas Protocol 의 reportlab 구현체 제공.
"""

from adapters.pdf.reportlab_canvas import ReportLabCanvas

__all__ = [
    "ReportLabCanvas",
]
