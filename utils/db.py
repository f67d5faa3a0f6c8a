"""
utils/db.py
-----------------
This module initializes and manages the MongoDB connection
for the entire Flask application.
"""

import logging
from flask_pymongo import PyMongo
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# Create a global MongoDB instance
mongo = PyMongo()


def ensure_indexes(db):
    """One users/results document per roll number."""
    db.users.create_index("rollNumber", unique=True)
    db.results.create_index("rollNumber", unique=True)


def init_db_connection(app):
    """
    Initialize MongoDB connection with Flask app.
    Reads MONGO_URI from the app config loaded in create_app().
    """
    mongo.init_app(app)

    if mongo.db is None:
        logger.warning("MONGO_URI has no database name")
        return mongo

    logger.info("MongoDB connection initialized (%s)", mongo.db.name)

    if app.config.get("MONGO_CREATE_INDEXES", True):
        try:
            ensure_indexes(mongo.db)
        except PyMongoError:
            # Server unreachable or duplicate rollNumbers already stored
            logger.exception("Could not create rollNumber indexes")

    return mongo
