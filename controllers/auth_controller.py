import logging

from flask import Blueprint, jsonify, request

from models.password import Password
from utils.errors import AttendanceError, InvalidCredentialsError, ValidationError, server_error

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


# Teacher login: opens attendance for everyone
@auth_bp.route("/authenticateTeacher", methods=["POST"])
def authenticate_teacher():
    data = request.get_json(silent=True) or {}
    password = data.get("password") if isinstance(data, dict) else None

    try:
        if not isinstance(password, str) or not password:
            raise ValidationError("password is required.")

        if Password.verify(password) is None:
            raise InvalidCredentialsError()

        Password.open_attendance()
        logger.info("Teacher authenticated, attendance opened")
        return jsonify({"success": True, "message": "Teacher authenticated successfully."})
    except AttendanceError as e:
        logger.info("Teacher authentication rejected: %s", e.message)
        return e.to_response()
    except Exception:
        logger.exception("Teacher authentication failed")
        return server_error()


# Current open/closed state of attendance
@auth_bp.route("/teacherAuthenticationStatus", methods=["GET"])
def teacher_authentication_status():
    try:
        return jsonify({"success": Password.is_attendance_open()})
    except Exception:
        logger.exception("Failed to read attendance status")
        return server_error()


# Logout: closes attendance
@auth_bp.route("/logout", methods=["POST"])
def logout():
    try:
        Password.close_attendance()
        logger.info("Teacher logged out, attendance closed")
        return jsonify({"success": True, "message": "Teacher logged out successfully."})
    except Exception:
        logger.exception("Teacher logout failed")
        return server_error()
