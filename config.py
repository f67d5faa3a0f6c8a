"""
config.py
-----------------
Application settings. Values come from the environment (or a local .env
file) so the same code runs on a laptop and on the deployed server.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/AttendanceSystem")
    PORT = int(os.getenv("PORT", 5000))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    MONGO_CREATE_INDEXES = _env_bool("MONGO_CREATE_INDEXES", True)

    # Classroom geofence
    CLASSROOM_LATITUDE = float(os.getenv("CLASSROOM_LATITUDE", 21.2486))
    CLASSROOM_LONGITUDE = float(os.getenv("CLASSROOM_LONGITUDE", 81.6094))
    ATTENDANCE_MAX_DISTANCE_KM = float(os.getenv("ATTENDANCE_MAX_DISTANCE_KM", 10))

    # One mark per roll number per local day
    ATTENDANCE_DAILY_LIMIT = _env_bool("ATTENDANCE_DAILY_LIMIT", True)
    ATTENDANCE_UTC_OFFSET_MINUTES = int(os.getenv("ATTENDANCE_UTC_OFFSET_MINUTES", 330))  # IST


class TestingConfig(Config):
    TESTING = True
    MONGO_CREATE_INDEXES = False
    MONGO_URI = "mongodb://localhost:27017/AttendanceSystemTest"
    LOG_LEVEL = "DEBUG"
    CLASSROOM_LATITUDE = 21.2486
    CLASSROOM_LONGITUDE = 81.6094
    ATTENDANCE_MAX_DISTANCE_KM = 10.0
    ATTENDANCE_DAILY_LIMIT = True
    ATTENDANCE_UTC_OFFSET_MINUTES = 330
