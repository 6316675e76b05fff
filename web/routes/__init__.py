"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- ledger: 원장 계산 / 기간 명세 / 집계 / 금고 원장
- reports: PDF 보고서 생성
"""
