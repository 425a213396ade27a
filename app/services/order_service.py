import logging

from sqlalchemy.orm import Session

from app.models.order import CartItem, Order, OrderItem
from app.utils.response import bad_request

logger = logging.getLogger(__name__)


def add_to_cart(db: Session, user_id: int, product_id: int, quantity: int) -> CartItem:
    """Add ``quantity`` of a product, merging into an existing cart line."""
    item = (
        db.query(CartItem)
        .filter(CartItem.user_id == user_id, CartItem.product_id == product_id)
        .first()
    )
    if item:
        item.quantity += quantity
    else:
        item = CartItem(user_id=user_id, product_id=product_id, quantity=quantity)
        db.add(item)
    db.commit()
    db.refresh(item)
    return item


def checkout_cart(db: Session, user_id: int, address_id: int) -> Order:
    """Turn the user's cart into an order priced at current product prices.

    Order creation and cart clearing share one commit.
    """
    cart_items = (
        db.query(CartItem)
        .filter(CartItem.user_id == user_id)
        .order_by(CartItem.id.asc())
        .all()
    )
    if not cart_items:
        raise bad_request("Cart is empty", "EMPTY_CART")

    order = Order(user_id=user_id, address_id=address_id, status="placed", total_amount=0)
    total = 0.0
    for cart_item in cart_items:
        unit_price = cart_item.product.price
        order.items.append(
            OrderItem(
                product_id=cart_item.product_id,
                quantity=cart_item.quantity,
                unit_price=unit_price,
            )
        )
        total += unit_price * cart_item.quantity
        db.delete(cart_item)

    order.total_amount = round(total, 2)
    db.add(order)
    db.commit()
    db.refresh(order)
    logger.info("Placed order id=%s user=%s items=%s total=%s", order.id, user_id, len(order.items), order.total_amount)
    return order
