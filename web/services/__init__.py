"""
Web 서비스 패키지

Workspace 연산을 묶고 도메인 객체를 응답 스키마로 변환한다.
"""
