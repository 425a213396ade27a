import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.product import Category, Product, ProductReview
from app.schemas.product import (
    CategoryCreate,
    CategoryResponse,
    ProductCreate,
    ProductResponse,
    ReviewCreate,
    ReviewResponse,
)
from app.utils.params import clean_text, is_blank, parse_int, parse_rating
from app.utils.response import bad_request, conflict, create_response, handle_exception, not_found

router = APIRouter(tags=["Catalog"])
logger = logging.getLogger(__name__)


def _product_payload(product: Product) -> dict:
    return ProductResponse.model_validate(product).to_payload()


@router.get("/categories")
def list_categories(db: Session = Depends(get_db)):
    try:
        categories = (
            db.query(Category)
            .filter(Category.is_active == True)
            .order_by(Category.name.asc())
            .all()
        )
        return create_response([CategoryResponse.model_validate(item).to_payload() for item in categories])
    except Exception as exc:
        return handle_exception(exc)


@router.post("/categories")
def create_category(body: CategoryCreate, db: Session = Depends(get_db)):
    try:
        if is_blank(body.name):
            raise bad_request("name is required", "MISSING_FIELDS")
        name = body.name.strip()
        if db.query(Category).filter(Category.name == name).first():
            raise conflict("Category already exists", "CATEGORY_EXISTS")

        category = Category(name=name, description=clean_text(body.description))
        db.add(category)
        db.commit()
        db.refresh(category)
        return create_response(CategoryResponse.model_validate(category).to_payload(), status.HTTP_201_CREATED)
    except Exception as exc:
        return handle_exception(exc)


@router.get("/products")
def get_products(
    product_id: str | None = Query(None, alias="id"),
    category_id: str | None = Query(None, alias="categoryId"),
    db: Session = Depends(get_db),
):
    try:
        if product_id:
            target_id = parse_int(product_id, "Valid ID is required", "INVALID_ID")
            product = db.query(Product).filter(Product.id == target_id).first()
            if not product:
                raise not_found("Product not found", "PRODUCT_NOT_FOUND")
            return create_response(_product_payload(product))

        query = db.query(Product).filter(Product.is_active == True)
        if category_id:
            target_category = parse_int(category_id, "Valid categoryId is required", "INVALID_CATEGORY_ID")
            query = query.filter(Product.category_id == target_category)
        products = query.order_by(Product.name.asc(), Product.id.asc()).all()
        return create_response([_product_payload(product) for product in products])
    except Exception as exc:
        return handle_exception(exc)


@router.post("/products")
def create_product(body: ProductCreate, db: Session = Depends(get_db)):
    try:
        if is_blank(body.category_id) or is_blank(body.name) or body.price is None:
            raise bad_request("categoryId, name, and price are required", "MISSING_FIELDS")
        if body.price < 0:
            raise bad_request("price must not be negative", "INVALID_PRICE")

        category_id = parse_int(body.category_id, "categoryId must be a valid integer", "INVALID_CATEGORY_ID")
        if not db.query(Category).filter(Category.id == category_id).first():
            raise not_found("Category not found", "CATEGORY_NOT_FOUND")

        product = Product(
            category_id=category_id,
            name=body.name.strip(),
            description=clean_text(body.description),
            price=body.price,
            image_url=clean_text(body.image_url),
            is_active=body.is_active,
        )
        db.add(product)
        db.commit()
        db.refresh(product)
        logger.info("Created product id=%s category=%s", product.id, category_id)
        return create_response(_product_payload(product), status.HTTP_201_CREATED)
    except Exception as exc:
        return handle_exception(exc)


@router.get("/products/reviews")
def list_reviews(
    product_id: str | None = Query(None, alias="productId"),
    db: Session = Depends(get_db),
):
    try:
        if not product_id:
            raise bad_request("Valid productId is required", "INVALID_PRODUCT_ID")
        target_id = parse_int(product_id, "Valid productId is required", "INVALID_PRODUCT_ID")
        reviews = (
            db.query(ProductReview)
            .filter(ProductReview.product_id == target_id)
            .order_by(ProductReview.created_at.desc(), ProductReview.id.desc())
            .all()
        )
        return create_response([ReviewResponse.model_validate(review).to_payload() for review in reviews])
    except Exception as exc:
        return handle_exception(exc)


@router.post("/products/reviews")
def create_review(body: ReviewCreate, db: Session = Depends(get_db)):
    try:
        if is_blank(body.product_id):
            raise bad_request("productId is required", "MISSING_PRODUCT_ID")
        if is_blank(body.user_id):
            raise bad_request("userId is required", "MISSING_USER_ID")

        product_id = parse_int(body.product_id, "productId must be a valid integer", "INVALID_PRODUCT_ID")
        user_id = parse_int(body.user_id, "userId must be a valid integer", "INVALID_USER_ID")
        rating = parse_rating(body.rating)

        if not db.query(Product).filter(Product.id == product_id).first():
            raise not_found("Product not found", "PRODUCT_NOT_FOUND")

        review = ProductReview(
            product_id=product_id,
            user_id=user_id,
            rating=rating,
            comments=clean_text(body.comments),
        )
        db.add(review)
        db.commit()
        db.refresh(review)
        return create_response(ReviewResponse.model_validate(review).to_payload(), status.HTTP_201_CREATED)
    except Exception as exc:
        return handle_exception(exc)
