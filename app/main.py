from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from app.config import settings
from app.database import Base, engine
from app.routers import (
    addresses,
    booking_assignments,
    bookings,
    employees,
    feedback,
    orders,
    otp,
    payments,
    pincode,
    products,
    session,
    users,
)
from app.utils.logging import setup_logging
from app.utils.response import create_response, error_response, handle_exception
from seed import run_seed

logger = setup_logging()

app = FastAPI(title=settings.PROJECT_NAME)
app.add_middleware(SessionMiddleware, secret_key=settings.SESSION_SECRET, session_cookie=settings.SESSION_COOKIE)

# Auto create tables
Base.metadata.create_all(bind=engine)

# CORS for SPA / API access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies as 400s in the shared error shape instead of 422s."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"
    logger.info("Rejected request to %s: %s", request.url.path, message)
    return error_response(message, status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST")


@app.on_event("startup")
def startup_event():
    if settings.SEED_ON_STARTUP:
        run_seed()


# Add routes
app.include_router(users.router)
app.include_router(otp.router)
app.include_router(addresses.router)
app.include_router(booking_assignments.router)
app.include_router(bookings.router)
app.include_router(feedback.router)
app.include_router(employees.router)
app.include_router(pincode.router)
app.include_router(session.router)
app.include_router(payments.router)
app.include_router(products.router)
app.include_router(orders.router)


@app.get("/")
def home():
    try:
        return create_response({"message": "Snapfix API running", "service": "snapfix-backend"})
    except Exception as exc:
        return handle_exception(exc)
