"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- properties: 부동산 등록/조회
- ledger: 부동산별 장부 (항목, 잠금, 합계, 세금/매각/임대료)
- daily_logs: 일일 현금/은행 로그, 정산
- banks: 은행 레지스트리
"""
