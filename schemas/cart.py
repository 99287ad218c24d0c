# schemas/cart.py
from enum import Enum
from pydantic import BaseModel, Field
from typing import Any, Dict, List

class CartItemStatus(str, Enum):
    NOT_PROCESSED = "Not processed"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

class CartItemIn(BaseModel):
    product_id: str
    quantity: int = Field(..., gt=0)
    price: float = Field(0, ge=0)
    taxable: bool = False

class CartItem(BaseModel):
    product_id: str
    quantity: int
    purchase_price: float = 0
    total_price: float = 0
    total_tax: float = 0
    price_with_tax: float = 0
    status: CartItemStatus = CartItemStatus.NOT_PROCESSED

class CartCreate(BaseModel):
    items: List[CartItemIn]

class CartAddItem(BaseModel):
    product: Dict[str, Any]

class CartCreated(BaseModel):
    success: bool = True
    cartId: str

class CartResult(BaseModel):
    success: bool = True

class CartErrorOut(BaseModel):
    error: str
