from utils.db import mongo
from datetime import datetime
from pymongo.errors import DuplicateKeyError


class User:

    @staticmethod
    def collection():
        return mongo.db.users

    def __init__(self, roll_number, created_at=None):
        self.roll_number = str(roll_number).strip()
        self.created_at = created_at or datetime.utcnow()

    # Convert to dictionary for MongoDB
    def to_dict(self):
        return {
            "rollNumber": self.roll_number,
            "createdAt": self.created_at
        }

    # Save new student
    def save(self):
        return self.collection().insert_one(self.to_dict())

    # Create unless the roll number is already registered
    @staticmethod
    def create(roll_number):
        if User.exists(roll_number):
            return None
        try:
            return User(roll_number).save()
        except DuplicateKeyError:
            return None

    # Find student by roll number
    @staticmethod
    def find_by_roll_number(roll_number):
        return User.collection().find_one({"rollNumber": str(roll_number).strip()})

    @staticmethod
    def exists(roll_number):
        return User.find_by_roll_number(roll_number) is not None

    @staticmethod
    def delete(roll_number):
        return User.collection().delete_one({"rollNumber": str(roll_number).strip()}).deleted_count > 0
