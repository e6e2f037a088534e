"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Entity repositories extend BaseRepository; query repositories select
columns straight into DTOs without materializing entities.

Modules:
    order_repository: 주문 엔티티 조회 및 검색 (Order entities, search)
    order_query_repository: 주문 + 주문 상품 DTO 직접 조회 (Order DTO projections)
    order_simple_query_repository: 주문 요약 DTO 직접 조회 (Summary projection)
    member_repository, item_repository: 주문 생성용 조회 (Lookups for placing orders)
"""
