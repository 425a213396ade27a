from app.schemas.base import CamelModel


class CartItemCreate(CamelModel):
    user_id: int | str | None = None
    product_id: int | str | None = None
    quantity: int = 1


class CartItemResponse(CamelModel):
    id: int
    user_id: int
    product_id: int
    quantity: int
    created_at: str


class OrderCreate(CamelModel):
    user_id: int | str | None = None
    address_id: int | str | None = None


class OrderUpdate(CamelModel):
    status: str | None = None


class OrderItemResponse(CamelModel):
    id: int
    product_id: int
    quantity: int
    unit_price: float


class OrderResponse(CamelModel):
    id: int
    user_id: int
    address_id: int
    status: str
    total_amount: float
    created_at: str
    updated_at: str
    items: list[OrderItemResponse] = []
