import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent  # -> project root

# Load .env explicitly from project root
load_dotenv(BASE_DIR / ".env")


class Settings:
    PROJECT_NAME = "Snapfix Backend"

    DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR / 'snapfix.db'}")

    SESSION_SECRET = os.getenv("SESSION_SECRET", "snapfix-dev-secret")
    SESSION_COOKIE = os.getenv("SESSION_COOKIE", "snapfix_session")

    OTP_EXPIRY_MINUTES = int(os.getenv("OTP_EXPIRY_MINUTES", 5))

    PINCODE_API_URL = os.getenv("PINCODE_API_URL", "https://api.postalpincode.in/pincode/{pincode}")
    PINCODE_LOOKUP_TIMEOUT = float(os.getenv("PINCODE_LOOKUP_TIMEOUT", 5))
    PINCODE_REMOTE_LOOKUP_ENABLED = os.getenv("PINCODE_REMOTE_LOOKUP_ENABLED", "true").lower() == "true"

    BOOKING_BASE_AMOUNT = float(os.getenv("BOOKING_BASE_AMOUNT", 499))

    SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "false").lower() == "true"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    cors_origins = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]


settings = Settings()
