import logging

from app.database import Base, engine, SessionLocal
from app.models.address import Address
from app.models.booking import Booking
from app.models.employee import Employee
from app.models.feedback import Feedback
from app.models import order, otp  # noqa: F401  (register remaining tables)
from app.models.product import Category, Product
from app.models.user import User
from app.utils.timestamps import iso_days_ago

logger = logging.getLogger("app.seed")

SAMPLE_USERS = [
    {"phone_number": "9876543210", "name": "Rajesh Kumar", "days_ago": 30},
    {"phone_number": "9988776655", "name": "Priya Sharma", "days_ago": 25},
    {"phone_number": "9123456789", "name": "Amit Patel", "days_ago": 20},
    {"phone_number": "9876501234", "name": "Sneha Reddy", "days_ago": 15},
    {"phone_number": "9988112233", "name": None, "days_ago": 10},
]

# Keyed by index into SAMPLE_USERS
SAMPLE_ADDRESSES = [
    (0, {"apartment_building": "Shanti Apartments, Flat 302", "street_area": "MG Road", "city": "Mumbai",
         "state": "Maharashtra", "pincode": "400001", "is_default": True, "days_ago": 25}),
    (0, {"apartment_building": "Office Address", "street_area": "Bandra West", "city": "Mumbai",
         "state": "Maharashtra", "pincode": "400050", "is_default": False, "days_ago": 20}),
    (1, {"apartment_building": "Green Heights, B-404", "street_area": "Koramangala", "city": "Bangalore",
         "state": "Karnataka", "pincode": "560034", "is_default": True, "days_ago": 22}),
    (2, {"apartment_building": "DLF Phase 2, Tower A", "street_area": "Gurgaon", "city": "Gurgaon",
         "state": "Haryana", "pincode": "122002", "is_default": True, "days_ago": 19}),
    (3, {"apartment_building": "Lakeside Residency, 5th Floor", "street_area": "Banjara Hills", "city": "Hyderabad",
         "state": "Telangana", "pincode": "500034", "is_default": True, "days_ago": 14}),
    (4, {"apartment_building": None, "street_area": "Park Street", "city": "Kolkata",
         "state": "West Bengal", "pincode": "700016", "is_default": True, "days_ago": 5}),
]

# (address index, booking fields, feedback or None)
SAMPLE_BOOKINGS = [
    (0, {"service_type": "plumber", "sub_service": "Leak repair", "work_description": "Kitchen sink leaking",
         "status": "completed", "professional_name": "Ramesh Yadav", "professional_contact": "+91 98765 11111",
         "days_ago": 20},
     {"rating": 5, "comments": "Excellent service! Fixed the leak quickly.", "days_ago": 19}),
    (1, {"service_type": "carpenter", "sub_service": "Furniture assembly", "work_description": "Assemble wardrobe",
         "status": "completed", "professional_name": "Suresh Verma", "professional_contact": "+91 98765 22222",
         "days_ago": 10},
     {"rating": 4, "comments": "Good work, took slightly longer than expected.", "days_ago": 9}),
    (3, {"service_type": "electrician", "sub_service": "Outlet repair", "work_description": "Two dead outlets",
         "status": "confirmed", "professional_name": "Anil Singh", "professional_contact": "+91 98765 33333",
         "days_ago": 3},
     None),
    (4, {"service_type": "painter", "sub_service": None, "work_description": "Repaint living room",
         "status": "pending", "professional_name": None, "professional_contact": None, "days_ago": 1},
     None),
]

SAMPLE_EMPLOYEES = [
    {"phone_number": "9000000001", "name": "Ramesh Yadav", "specialization": "plumber"},
    {"phone_number": "9000000002", "name": "Suresh Verma", "specialization": "carpenter"},
    {"phone_number": "9000000003", "name": "Anil Singh", "specialization": "electrician"},
]

SAMPLE_CATALOG = {
    "Plumbing Supplies": [
        {"name": "Tap washer kit", "price": 149.0},
        {"name": "Flexible sink hose", "price": 299.0},
    ],
    "Electrical": [
        {"name": "LED bulb 9W", "price": 99.0},
        {"name": "Modular switch", "price": 79.0},
    ],
}


def seed_users(db) -> list[User]:
    users = []
    for entry in SAMPLE_USERS:
        stamp = iso_days_ago(entry["days_ago"])
        user = User(phone_number=entry["phone_number"], name=entry["name"], created_at=stamp, updated_at=stamp)
        db.add(user)
        users.append(user)
    db.flush()
    return users


def seed_addresses(db, users: list[User]) -> list[Address]:
    addresses = []
    for user_index, fields in SAMPLE_ADDRESSES:
        data = dict(fields)
        stamp = iso_days_ago(data.pop("days_ago"))
        address = Address(user_id=users[user_index].id, created_at=stamp, **data)
        db.add(address)
        addresses.append(address)
    db.flush()
    return addresses


def seed_bookings(db, addresses: list[Address]) -> None:
    for address_index, fields, review in SAMPLE_BOOKINGS:
        address = addresses[address_index]
        data = dict(fields)
        stamp = iso_days_ago(data.pop("days_ago"))
        booking = Booking(
            user_id=address.user_id,
            address_id=address.id,
            booking_date=stamp,
            created_at=stamp,
            completion_date=stamp if data["status"] == "completed" else None,
            **data,
        )
        db.add(booking)
        db.flush()
        if review:
            db.add(
                Feedback(
                    booking_id=booking.id,
                    user_id=address.user_id,
                    rating=review["rating"],
                    comments=review["comments"],
                    created_at=iso_days_ago(review["days_ago"]),
                )
            )


def seed_employees(db) -> None:
    for entry in SAMPLE_EMPLOYEES:
        if db.query(Employee).filter(Employee.phone_number == entry["phone_number"]).first():
            continue
        db.add(Employee(status="available", **entry))


def seed_catalog(db) -> None:
    if db.query(Category).count() > 0:
        return
    for category_name, products in SAMPLE_CATALOG.items():
        category = Category(name=category_name)
        db.add(category)
        db.flush()
        for product in products:
            db.add(Product(category_id=category.id, **product))


def run_seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).count() == 0:
            users = seed_users(db)
            addresses = seed_addresses(db, users)
            seed_bookings(db, addresses)
            logger.info("Sample users, addresses, bookings and feedback seeded")
        else:
            logger.info("Users already present, skipping sample bookings")

        seed_employees(db)
        seed_catalog(db)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Seeding failed")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    from app.utils.logging import setup_logging

    setup_logging()
    run_seed()
