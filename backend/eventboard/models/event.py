# eventboard/models/event.py
from tortoise import fields, models


class Event(models.Model):
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=255)
    description = fields.TextField(default="")
    date = fields.DatetimeField()  # Concrete point in time (UTC)
    location = fields.CharField(max_length=255, default="")

    users: fields.ManyToManyRelation["User"] = fields.ManyToManyField(
        "models.User", related_name="events", through="event_users"
    )
    groups: fields.ManyToManyRelation["Group"] = fields.ManyToManyField(
        "models.Group", related_name="events", through="event_groups"
    )

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "events"
