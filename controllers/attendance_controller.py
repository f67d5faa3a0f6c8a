import logging

from flask import Blueprint, current_app, jsonify, request

from utils.errors import AttendanceError, server_error
from utils.mark_attendance import mark_attendance, parse_mark_request

logger = logging.getLogger(__name__)

attendance_bp = Blueprint("attendance", __name__)


@attendance_bp.route("/markAttendance", methods=["POST"])
def mark():
    try:
        roll_number, latitude, longitude = parse_mark_request(request.get_json(silent=True))
        result, distance = mark_attendance(roll_number, latitude, longitude, current_app.config)

        return jsonify({
            "success": True,
            "message": "Attendance marked successfully.",
            "distance": distance,
            "attendanceCount": result.get("attendanceCount", 0)
        })
    except AttendanceError as e:
        return e.to_response()
    except Exception:
        logger.exception("Failed to mark attendance")
        return server_error()
