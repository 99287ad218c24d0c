# services/pricing.py
from typing import Iterable, List
from schemas.cart import CartItem, CartItemIn

def calculate_items_sales_tax(items: Iterable[CartItemIn], tax_rate: float) -> List[CartItem]:
    """Price each requested item; taxable items also get tax and price-with-tax."""
    priced: List[CartItem] = []
    for item in items:
        total_price = round(item.price * item.quantity, 2)
        total_tax = 0.0
        price_with_tax = 0.0
        if item.taxable:
            total_tax = round(item.price * tax_rate * item.quantity, 2)
            price_with_tax = round(total_price + total_tax, 2)

        priced.append(CartItem(
            product_id=item.product_id,
            quantity=item.quantity,
            purchase_price=item.price,
            total_price=total_price,
            total_tax=total_tax,
            price_with_tax=price_with_tax,
        ))
    return priced
