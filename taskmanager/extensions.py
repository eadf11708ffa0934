"""Flask extensions shared by the task manager."""

from flask_marshmallow import Marshmallow
from flask_sqlalchemy import SQLAlchemy


# Owns the engine and the scoped session behind TaskStore
db = SQLAlchemy()

# Base class for the task request/response schemas
ma = Marshmallow()
