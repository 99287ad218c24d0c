# core/errors.py
from typing import Optional

# Thông báo duy nhất trả về cho client với mọi lỗi của giỏ hàng
GENERIC_ERROR = "Your request could not be processed. Please try again."


class CartError(Exception):
    """Base error for cart operations. ``kind`` tags the variant in logs."""

    kind = "cart"

    def __init__(self, message: str, operation: Optional[str] = None, cart_id: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
        self.cart_id = cart_id


class ValidationError(CartError):
    kind = "validation"


class PersistenceError(CartError):
    kind = "persistence"


class NotFoundError(CartError):
    """Reserved variant for a missing cart.

    Nothing raises it today: operations on unknown ids succeed as no-ops.
    """

    kind = "not_found"
