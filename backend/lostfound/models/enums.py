from sqlalchemy import Enum

# Named enum types: native ENUMs on Postgres, plain VARCHAR elsewhere (SQLite in tests).
# Values mirror lostfound.matching.records so rows convert to engine records 1:1.

item_type_enum = Enum("lost", "found", name="item_type_enum")
item_status_enum = Enum("active", "recovered", "removed", name="item_status_enum")
match_status_enum = Enum("pending", "confirmed", "rejected", name="match_status_enum")
# Only in-app delivery exists today
notification_channel_enum = Enum("inapp", name="notification_channel_enum")
notification_status_enum = Enum("queued", "sent", "failed", "read", name="notification_status_enum")
