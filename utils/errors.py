from flask import jsonify


class AttendanceError(Exception):
    """Business-rule failure that maps onto a JSON error response."""

    status_code = 400
    message = "Bad request."

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_response(self):
        return jsonify({"success": False, "message": self.message}), self.status_code


class ValidationError(AttendanceError):
    status_code = 400
    message = "Invalid request body."


class InvalidCredentialsError(AttendanceError):
    status_code = 403
    message = "Invalid credentials. Only teachers are allowed to authenticate."


class AttendanceClosedError(AttendanceError):
    status_code = 403
    message = "Attendance is not open."


class UserNotFoundError(AttendanceError):
    status_code = 404
    message = "User not found."


class OutOfRangeError(AttendanceError):
    status_code = 403
    message = "You are not within the attendance range."


class AlreadyMarkedError(AttendanceError):
    status_code = 403
    message = "Attendance already marked for today."


def server_error():
    return jsonify({"success": False, "message": "Internal server error."}), 500
