from utils.db import mongo
from werkzeug.security import generate_password_hash, check_password_hash


class Password:
    """
    Shared teacher credential. The isAllowed flag on the stored document(s)
    is the attendance open/closed switch.
    """

    @staticmethod
    def collection():
        return mongo.db.passwords

    # Replace the shared credential; attendance starts closed
    @staticmethod
    def set_password(raw_password):
        Password.collection().delete_many({})
        return Password.collection().insert_one({
            "password": generate_password_hash(raw_password),
            "isAllowed": False
        })

    @staticmethod
    def verify(raw_password):
        if not raw_password:
            return None
        for doc in Password.collection().find():
            if check_password_hash(doc.get("password") or "", raw_password):
                return doc
        return None

    @staticmethod
    def open_attendance():
        return Password.collection().update_many({}, {"$set": {"isAllowed": True}})

    @staticmethod
    def close_attendance():
        return Password.collection().update_many({}, {"$set": {"isAllowed": False}})

    @staticmethod
    def is_attendance_open():
        return Password.collection().count_documents({"isAllowed": True}) > 0
