"""
Cart service: the only place that talks to the ``carts`` and ``products``
collections.

Every operation is a single awaited driver call (``create_cart`` adds the
stock decrement). Nothing is retried; driver errors come back as
``PersistenceError`` and unknown ids are silent no-ops.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Sequence

from pymongo import UpdateOne
from pymongo.errors import PyMongoError

from core.errors import PersistenceError, ValidationError
from schemas.cart import CartItemIn
from services.pricing import calculate_items_sales_tax

log = logging.getLogger(__name__)


def new_cart_id() -> str:
    return str(uuid.uuid4())


class CartService:
    def __init__(self, carts, products, tax_rate: float = 0.0):
        self.carts = carts
        self.products = products
        self.tax_rate = tax_rate

    async def create_cart(self, items: Sequence[CartItemIn], user_id: Optional[str] = None) -> str:
        """
        Inserts a new cart holding the priced items, then takes the items
        out of stock.

        Returns:
            str: id of the new cart.
        Raises:
            PersistenceError: if the insert or the stock update fails. The
                cart is not removed when only the stock update fails.
        """
        cart_id = new_cart_id()
        priced = calculate_items_sales_tax(items, self.tax_rate)
        now = datetime.now(timezone.utc)
        cart_doc = {
            "_id": cart_id,
            "user_id": user_id,
            "items": [item.model_dump(mode="json") for item in priced],
            "created_at": now,
            "updated_at": now,
        }

        try:
            await self.carts.insert_one(cart_doc)
        except PyMongoError as e:
            raise PersistenceError(f"insert failed: {e}", operation="create_cart", cart_id=cart_id) from e
        log.info(f"[Cart: {cart_id}] Created with {len(priced)} item(s) for user {user_id}.")

        await self.decrease_quantity(priced, cart_id=cart_id)
        return cart_id

    async def add_item(self, cart_id: str, product: Optional[Dict[str, Any]]) -> None:
        # Không gộp sản phẩm trùng: luôn $push thêm một dòng mới
        if not product:
            raise ValidationError("product snapshot is required", operation="add_item", cart_id=cart_id)

        await self._update(cart_id, "add_item", {
            "$push": {"items": product},
            "$set": {"updated_at": datetime.now(timezone.utc)},
        })

    async def remove_item(self, cart_id: str, product_id: str) -> None:
        # $pull xoá mọi dòng có cùng product_id
        await self._update(cart_id, "remove_item", {
            "$pull": {"items": {"product_id": product_id}},
            "$set": {"updated_at": datetime.now(timezone.utc)},
        })

    async def delete_cart(self, cart_id: str) -> None:
        try:
            result = await self.carts.delete_one({"_id": cart_id})
        except PyMongoError as e:
            raise PersistenceError(f"delete failed: {e}", operation="delete_cart", cart_id=cart_id) from e
        log.info(f"[Cart: {cart_id}] Deleted ({result.deleted_count} document).")

    async def decrease_quantity(self, items: Iterable[Any], cart_id: Optional[str] = None) -> None:
        """
        Decrements ``stock`` of each item's product by the item's quantity
        in a single bulk write.

        There is no floor at zero and no atomicity across items: whatever
        the driver applied before a failure stays applied.
        """
        ops = [
            UpdateOne({"_id": item.product_id}, {"$inc": {"stock": -item.quantity}})
            for item in items
        ]
        if not ops:
            # bulk_write không chấp nhận danh sách rỗng
            return

        try:
            result = await self.products.bulk_write(ops)
        except PyMongoError as e:
            raise PersistenceError(f"stock update failed: {e}", operation="decrease_quantity", cart_id=cart_id) from e
        log.debug(f"Stock decremented for {len(ops)} product(s), modified {result.modified_count}.")

    async def _update(self, cart_id: str, operation: str, update: Dict[str, Any]) -> None:
        try:
            result = await self.carts.update_one({"_id": cart_id}, update)
        except PyMongoError as e:
            raise PersistenceError(f"update failed: {e}", operation=operation, cart_id=cart_id) from e
        # matched_count == 0: cart không tồn tại, vẫn coi là thành công
        log.info(f"[Cart: {cart_id}] {operation} matched {result.matched_count} cart(s).")
