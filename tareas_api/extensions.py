"""Flask extensions initialization."""

from flask_marshmallow import Marshmallow


# Marshmallow serialization instance
ma = Marshmallow()
