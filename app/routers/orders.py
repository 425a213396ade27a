from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.address import Address
from app.models.order import ORDER_STATUSES, CartItem, Order
from app.models.product import Product
from app.schemas.order import CartItemCreate, CartItemResponse, OrderCreate, OrderResponse, OrderUpdate
from app.services.order_service import add_to_cart, checkout_cart
from app.utils.params import is_blank, parse_int
from app.utils.response import bad_request, create_response, handle_exception, not_found

router = APIRouter(tags=["Orders"])


def _order_payload(order: Order) -> dict:
    return OrderResponse.model_validate(order).to_payload()


@router.get("/cart")
def get_cart(
    user_id: str | None = Query(None, alias="userId"),
    db: Session = Depends(get_db),
):
    try:
        if not user_id:
            raise bad_request("Valid userId is required", "INVALID_USER_ID")
        owner_id = parse_int(user_id, "Valid userId is required", "INVALID_USER_ID")
        items = db.query(CartItem).filter(CartItem.user_id == owner_id).order_by(CartItem.id.asc()).all()
        return create_response([CartItemResponse.model_validate(item).to_payload() for item in items])
    except Exception as exc:
        return handle_exception(exc)


@router.post("/cart")
def add_cart_item(body: CartItemCreate, db: Session = Depends(get_db)):
    try:
        if is_blank(body.user_id):
            raise bad_request("userId is required", "MISSING_USER_ID")
        if is_blank(body.product_id):
            raise bad_request("productId is required", "MISSING_PRODUCT_ID")
        owner_id = parse_int(body.user_id, "userId must be a valid integer", "INVALID_USER_ID")
        product_id = parse_int(body.product_id, "productId must be a valid integer", "INVALID_PRODUCT_ID")
        if body.quantity < 1:
            raise bad_request("quantity must be at least 1", "INVALID_QUANTITY")

        product = db.query(Product).filter(Product.id == product_id, Product.is_active == True).first()
        if not product:
            raise not_found("Product not found", "PRODUCT_NOT_FOUND")

        item = add_to_cart(db, owner_id, product_id, body.quantity)
        return create_response(CartItemResponse.model_validate(item).to_payload(), status.HTTP_201_CREATED)
    except Exception as exc:
        return handle_exception(exc)


@router.delete("/cart")
def remove_cart_item(
    item_id: str | None = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    try:
        if not item_id:
            raise bad_request("Valid ID is required", "INVALID_ID")
        target_id = parse_int(item_id, "Valid ID is required", "INVALID_ID")
        item = db.query(CartItem).filter(CartItem.id == target_id).first()
        if not item:
            raise not_found("Cart item not found", "CART_ITEM_NOT_FOUND")
        db.delete(item)
        db.commit()
        return create_response({"message": "Cart item removed", "id": target_id})
    except Exception as exc:
        return handle_exception(exc)


@router.get("/orders")
def get_orders(
    order_id: str | None = Query(None, alias="id"),
    user_id: str | None = Query(None, alias="userId"),
    db: Session = Depends(get_db),
):
    try:
        if order_id:
            target_id = parse_int(order_id, "Valid ID is required", "INVALID_ID")
            order = db.query(Order).filter(Order.id == target_id).first()
            if not order:
                raise not_found("Order not found", "ORDER_NOT_FOUND")
            return create_response(_order_payload(order))

        if user_id:
            owner_id = parse_int(user_id, "Valid userId is required", "INVALID_USER_ID")
            orders = (
                db.query(Order)
                .filter(Order.user_id == owner_id)
                .order_by(Order.created_at.desc(), Order.id.desc())
                .all()
            )
            return create_response([_order_payload(order) for order in orders])

        raise bad_request("Either id or userId parameter is required", "MISSING_PARAMETER")
    except Exception as exc:
        return handle_exception(exc)


@router.post("/orders")
def place_order(body: OrderCreate, db: Session = Depends(get_db)):
    try:
        if is_blank(body.user_id):
            raise bad_request("userId is required", "MISSING_USER_ID")
        if is_blank(body.address_id):
            raise bad_request("addressId is required", "MISSING_ADDRESS_ID")
        owner_id = parse_int(body.user_id, "userId must be a valid integer", "INVALID_USER_ID")
        address_id = parse_int(body.address_id, "addressId must be a valid integer", "INVALID_ADDRESS_ID")
        address = db.query(Address).filter(Address.id == address_id).first()
        if not address:
            raise not_found("Address not found", "ADDRESS_NOT_FOUND")

        order = checkout_cart(db, owner_id, address_id)
        return create_response(_order_payload(order), status.HTTP_201_CREATED)
    except Exception as exc:
        return handle_exception(exc)


@router.put("/orders")
def update_order(
    body: OrderUpdate,
    order_id: str | None = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    try:
        if not order_id:
            raise bad_request("Valid ID is required", "INVALID_ID")
        target_id = parse_int(order_id, "Valid ID is required", "INVALID_ID")
        order = db.query(Order).filter(Order.id == target_id).first()
        if not order:
            raise not_found("Order not found", "ORDER_NOT_FOUND")

        if body.status:
            normalized = body.status.strip().lower()
            if normalized not in ORDER_STATUSES:
                raise bad_request(f"status must be one of: {', '.join(ORDER_STATUSES)}", "INVALID_STATUS")
            order.status = normalized

        db.commit()
        db.refresh(order)
        return create_response(_order_payload(order))
    except Exception as exc:
        return handle_exception(exc)
