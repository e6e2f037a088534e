"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns.
These simplify error raising across services and domain models by
eliminating the need to specify status codes at each call site.

Usage:
    from shop_api.utils.exceptions import NotFoundError, BadRequestError
    raise NotFoundError("Order not found")
    raise BadRequestError("Delivered orders cannot be cancelled")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (member, item, order) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request is valid per Pydantic but violates a business rule
    (e.g. cancelling an order whose delivery is already complete).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotEnoughStockError(BadRequestError):
    """재고 부족 예외 — 주문 수량이 상품 재고를 초과할 때.

    Raised by Item.remove_stock when the remaining stock would drop below zero.
    """

    def __init__(self, detail: str = "need more stock") -> None:
        super().__init__(detail=detail)
