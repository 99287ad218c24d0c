import logging
from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from core.dependencies import get_current_user, get_cart_service
from core.errors import CartError, GENERIC_ERROR
from schemas.cart import CartCreate, CartAddItem, CartCreated, CartResult, CartErrorOut
from services.cart import CartService

log = logging.getLogger(__name__)

router = APIRouter(
    prefix="/cart",
    tags=["Cart"],
    responses={400: {"model": CartErrorOut}},
)

def request_failed(exc: Exception, operation: str, cart_id: Optional[str] = None) -> JSONResponse:
    """Log the real cause and answer with the single generic 400 body"""
    cart_id = cart_id or getattr(exc, "cart_id", None)
    if isinstance(exc, CartError):
        log.error(f"[Cart: {cart_id}] {operation} failed ({exc.kind}): {exc}")
    else:
        log.exception(f"[Cart: {cart_id}] {operation} failed unexpectedly")
    return JSONResponse(status_code=400, content={"error": GENERIC_ERROR})

# POST /cart/add - Tạo giỏ hàng mới (checkout) và trừ kho
@router.post("/add", response_model=CartCreated)
async def add_cart(
    data: CartCreate,
    current_user: dict = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
):
    """
    Creates the cart and takes its items out of stock.

    A 400 does not always mean nothing was written: when the insert succeeds
    but the stock update fails, the cart document stays behind and a retry
    creates a second cart.
    """
    try:
        cart_id = await service.create_cart(data.items, user_id=str(current_user["_id"]))
    except Exception as e:
        return request_failed(e, "create_cart")
    return {"success": True, "cartId": cart_id}

# POST /cart/add/{cart_id} - Thêm sản phẩm vào giỏ
@router.post("/add/{cart_id}", response_model=CartResult)
async def add_item(
    cart_id: str,
    data: CartAddItem,
    current_user: dict = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
):
    try:
        await service.add_item(cart_id, data.product)
    except Exception as e:
        return request_failed(e, "add_item", cart_id)
    return {"success": True}

# DELETE /cart/delete/{cart_id}/{product_id} - Xoá 1 sản phẩm khỏi giỏ
@router.delete("/delete/{cart_id}/{product_id}", response_model=CartResult)
async def remove_item(
    cart_id: str,
    product_id: str,
    current_user: dict = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
):
    try:
        await service.remove_item(cart_id, product_id)
    except Exception as e:
        return request_failed(e, "remove_item", cart_id)
    return {"success": True}

# DELETE /cart/delete/{cart_id} - Xoá toàn bộ giỏ hàng
@router.delete("/delete/{cart_id}", response_model=CartResult)
async def delete_cart(
    cart_id: str,
    current_user: dict = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
):
    try:
        await service.delete_cart(cart_id)
    except Exception as e:
        return request_failed(e, "delete_cart", cart_id)
    return {"success": True}
