# eventboard/models/group.py
"""
Database model for groups.
A group has a unique name and a many-to-many membership of users.
"""
from tortoise import fields, models


class Group(models.Model):
    """
    Group database model.

    Relationships:
    - Many-to-many with User through the "user_groups" join table
    - Many-to-many with Event (reverse of Event.groups, via "event_groups")
    """
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=191, unique=True)  # Group name (unique)
    users: fields.ManyToManyRelation["User"] = fields.ManyToManyField(
        "models.User",
        related_name="groups",
        through="user_groups",
    )  # Join rows are removed with the group (ON DELETE CASCADE)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "groups"

    def __str__(self) -> str:
        return self.name
