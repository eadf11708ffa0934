"""Task-related Marshmallow schemas."""

from datetime import timezone

from marshmallow import EXCLUDE, fields

from taskmanager.extensions import ma


class UtcIsoDateTime(fields.DateTime):
    """ISO-8601 datetime that is always rendered with a UTC offset."""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is not None:
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            value = value.astimezone(timezone.utc)
        return super()._serialize(value, attr, obj, **kwargs)


class StrictBool(fields.Boolean):
    """Boolean that only accepts the JSON literals true and false."""

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, bool):
            raise self.make_error("invalid", input=value)
        return value


class TaskSchema(ma.Schema):
    """Schema for task serialization."""

    id = fields.Int(dump_only=True)
    title = fields.Str(dump_only=True)
    description = fields.Str(dump_only=True)
    completed = fields.Bool(dump_only=True)
    created_at = UtcIsoDateTime(dump_only=True, format="iso", data_key="createdAt")
    updated_at = UtcIsoDateTime(dump_only=True, format="iso", data_key="updatedAt")


class TaskRequestSchema(ma.Schema):
    """Schema for create and update request validation.

    Every field is required and may not be null. An empty string is a
    valid title or description.
    """

    class Meta:
        unknown = EXCLUDE

    title = fields.Str(required=True)
    description = fields.Str(required=True)
    completed = StrictBool(required=True)
