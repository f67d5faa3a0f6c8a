from utils.db import mongo
from datetime import datetime
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError


class Result:
    """
    Per-student attendance record.
    rollNumber      -> student the record belongs to
    latitude        -> last accepted latitude
    longitude       -> last accepted longitude
    distance        -> last computed distance from the classroom (km)
    attendanceCount -> number of accepted marks so far
    lastMarkedDate  -> local date of the last accepted mark (YYYY-MM-DD)
    """

    @staticmethod
    def collection():
        return mongo.db.results

    @staticmethod
    def find_all():
        return list(Result.collection().find().sort("rollNumber", 1))

    @staticmethod
    def find_by_roll_number(roll_number):
        return Result.collection().find_one({"rollNumber": roll_number})

    @staticmethod
    def record_mark(roll_number, latitude, longitude, distance, today):
        """
        First mark inserts the record with a count of 1, later marks bump
        the count and overwrite the last point, distance and date.
        """
        now = datetime.utcnow()
        update = {
            "$set": {
                "latitude": latitude,
                "longitude": longitude,
                "distance": distance,
                "lastMarkedDate": today,
                "updatedAt": now
            },
            "$inc": {"attendanceCount": 1},
            "$setOnInsert": {"createdAt": now}
        }
        try:
            return Result._upsert(roll_number, update)
        except DuplicateKeyError:
            # A concurrent first mark inserted the record; this one updates it
            return Result._upsert(roll_number, update)

    @staticmethod
    def _upsert(roll_number, update):
        return Result.collection().find_one_and_update(
            {"rollNumber": roll_number},
            update,
            upsert=True,
            return_document=ReturnDocument.AFTER
        )

    @staticmethod
    def to_json(doc):
        data = dict(doc)
        data["_id"] = str(data["_id"])
        data.setdefault("attendanceCount", 0)
        for key in ("createdAt", "updatedAt"):
            if isinstance(data.get(key), datetime):
                data[key] = data[key].isoformat()
        return data
