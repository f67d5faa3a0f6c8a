import logging
from datetime import datetime, timedelta, timezone

from models.password import Password
from models.result import Result
from models.users import User
from utils.errors import (
    AlreadyMarkedError,
    AttendanceClosedError,
    OutOfRangeError,
    UserNotFoundError,
    ValidationError,
)
from utils.geo import calculate_distance, is_within_range, parse_coordinate

logger = logging.getLogger(__name__)


# ============================
# UTILITIES
# ============================
def local_today(config, now=None):
    tz = timezone(timedelta(minutes=config.get("ATTENDANCE_UTC_OFFSET_MINUTES", 0)))
    now = now or datetime.now(tz)
    return now.astimezone(tz).strftime("%Y-%m-%d")


def parse_mark_request(data):
    """Validate a markAttendance body and return (roll_number, latitude, longitude)."""
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object.")

    roll_number = data.get("rollNumber")
    if isinstance(roll_number, bool) or not isinstance(roll_number, (str, int)):
        raise ValidationError("rollNumber is required.")
    roll_number = str(roll_number).strip()
    if not roll_number:
        raise ValidationError("rollNumber is required.")

    latitude = parse_coordinate(data.get("latitude"), "latitude", 90)
    longitude = parse_coordinate(data.get("longitude"), "longitude", 180)
    return roll_number, latitude, longitude


# ============================
# MARK ATTENDANCE
# ============================
def mark_attendance(roll_number, latitude, longitude, config, today=None):
    """
    Apply the attendance rules in order and record the mark.
    Returns (result_document, distance_km). Raises an AttendanceError
    subclass when the mark is rejected; nothing is written in that case.
    """
    if not Password.is_attendance_open():
        raise AttendanceClosedError()

    if User.find_by_roll_number(roll_number) is None:
        raise UserNotFoundError()

    distance = calculate_distance(
        latitude,
        longitude,
        config["CLASSROOM_LATITUDE"],
        config["CLASSROOM_LONGITUDE"]
    )

    if not is_within_range(distance, config["ATTENDANCE_MAX_DISTANCE_KM"]):
        logger.info("[RANGE] %s rejected at %.3f km", roll_number, distance)
        raise OutOfRangeError()

    today = today or local_today(config)

    if config.get("ATTENDANCE_DAILY_LIMIT", True):
        existing = Result.find_by_roll_number(roll_number)
        if existing and existing.get("lastMarkedDate") == today:
            logger.info("[REPEAT] %s already marked on %s", roll_number, today)
            raise AlreadyMarkedError()

    result = Result.record_mark(roll_number, latitude, longitude, distance, today)
    logger.info("[MARK] %s | count %s | %.3f km", roll_number, result.get("attendanceCount"), distance)
    return result, distance
