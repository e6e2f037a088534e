"""서비스 패키지 — 주문 조회 전략 및 주문 명령 계층.

Service package — Order fetch strategies and order commands.
Services call repositories for DB access and map entities to response DTOs.

Modules:
    order_fetch_service: 주문 + 주문 상품 조회 v1~v6 (Collection fetch strategies)
    simple_order_fetch_service: 주문 요약 조회 v1~v4 (To-one fetch strategies)
    order_service: 주문 생성/취소 (Place and cancel orders)
"""
