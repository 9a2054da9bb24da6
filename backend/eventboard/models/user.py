# eventboard/models/user.py
"""
Database model for users.
Represents a user account: login credentials, profile fields and the
soft-delete marker.
"""
from tortoise import fields, models


class User(models.Model):
    """
    User database model.

    Relationships:
    - Many-to-many with Group (reverse of Group.users, via "user_groups")
    - Many-to-many with Event (reverse of Event.users, via "event_users")

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Email is unique (DB constraint); a soft-deleted user keeps its row, so
      its email stays reserved
    """
    id = fields.IntField(pk=True)  # Primary key: server-assigned identifier
    username = fields.CharField(max_length=191)  # Display name
    email = fields.CharField(max_length=255, unique=True)  # Login email (unique)
    password_hash = fields.CharField(max_length=255)  # Argon2 hash, never plain text
    deleted_at = fields.DatetimeField(null=True)  # Soft-delete marker; null while the account is live
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name

    def __str__(self) -> str:
        return self.username
