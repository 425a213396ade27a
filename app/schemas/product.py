from app.schemas.base import CamelModel


class CategoryCreate(CamelModel):
    name: str | None = None
    description: str | None = None


class CategoryResponse(CamelModel):
    id: int
    name: str
    description: str | None = None
    is_active: bool
    created_at: str


class ProductCreate(CamelModel):
    category_id: int | str | None = None
    name: str | None = None
    description: str | None = None
    price: float | None = None
    image_url: str | None = None
    is_active: bool = True


class ProductResponse(CamelModel):
    id: int
    category_id: int
    name: str
    description: str | None = None
    price: float
    image_url: str | None = None
    is_active: bool
    created_at: str
    updated_at: str


class ReviewCreate(CamelModel):
    product_id: int | str | None = None
    user_id: int | str | None = None
    rating: int | str | None = None
    comments: str | None = None


class ReviewResponse(CamelModel):
    id: int
    product_id: int
    user_id: int
    rating: int
    comments: str | None = None
    created_at: str
