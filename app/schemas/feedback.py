from app.schemas.base import CamelModel


class FeedbackCreate(CamelModel):
    booking_id: int | str | None = None
    user_id: int | str | None = None
    rating: int | str | None = None
    comments: str | None = None


class FeedbackResponse(CamelModel):
    id: int
    booking_id: int
    user_id: int
    rating: int
    comments: str | None = None
    created_at: str
