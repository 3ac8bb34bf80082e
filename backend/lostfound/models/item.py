from sqlalchemy import func, Index
from sqlalchemy.dialects.postgresql import JSONB
from ..extensions import db
from ..matching.records import ItemRecord
from .enums import item_type_enum, item_status_enum


class Item(db.Model):
    __tablename__ = "items"

    id = db.Column(db.BigInteger().with_variant(db.Integer, "sqlite"), primary_key=True)
    # Weak owner reference: matching never touches the user
    owner_user_id = db.Column(db.BigInteger)
    type = db.Column(item_type_enum, nullable=False)
    category = db.Column(db.String(80), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    location = db.Column(db.String(200))
    occurred_on = db.Column(db.Date)
    contact_info = db.Column(db.String(255))
    tags = db.Column(db.JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)
    status = db.Column(item_status_enum, nullable=False, default="active", server_default="active")
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        # Candidate lookups filter on all three
        Index("idx_items_type_category_status", "type", "category", "status"),
        Index("idx_items_owner", "owner_user_id"),
        Index("idx_items_created_at", "created_at"),
    )

    def to_record(self) -> ItemRecord:
        return ItemRecord(
            id=self.id,
            type=self.type,
            category=self.category,
            title=self.title,
            description=self.description,
            location=self.location or "",
            status=self.status or "active",
            owner_id=self.owner_user_id,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
