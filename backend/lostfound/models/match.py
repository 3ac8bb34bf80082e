from sqlalchemy import func, Index
from ..extensions import db
from ..matching.records import MatchRecord
from .enums import match_status_enum


class Match(db.Model):
    __tablename__ = "matches"

    id = db.Column(db.BigInteger().with_variant(db.Integer, "sqlite"), primary_key=True)
    lost_item_id = db.Column(db.BigInteger, db.ForeignKey("items.id", ondelete="CASCADE"), nullable=False)
    found_item_id = db.Column(db.BigInteger, db.ForeignKey("items.id", ondelete="CASCADE"), nullable=False)
    confidence = db.Column(db.Float, nullable=False)
    status = db.Column(match_status_enum, nullable=False, default="pending", server_default="pending")
    method = db.Column(db.String(32), nullable=False, default="ai", server_default="ai")
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())

    lost_item = db.relationship("Item", foreign_keys=[lost_item_id])
    found_item = db.relationship("Item", foreign_keys=[found_item_id])

    # No unique constraint on (lost, found): repeated matching runs may store the same pair again
    __table_args__ = (
        Index("idx_matches_lost", "lost_item_id"),
        Index("idx_matches_found", "found_item_id"),
    )

    @classmethod
    def from_record(cls, rec: MatchRecord) -> "Match":
        return cls(
            lost_item_id=rec.lost_item_id,
            found_item_id=rec.found_item_id,
            confidence=rec.confidence,
            status=rec.status.value,
            method=rec.method,
            created_at=rec.created_at,
        )

    def to_record(self) -> MatchRecord:
        return MatchRecord(
            id=self.id,
            lost_item_id=self.lost_item_id,
            found_item_id=self.found_item_id,
            confidence=float(self.confidence),
            status=self.status,
            method=self.method,
            created_at=self.created_at,
        )
