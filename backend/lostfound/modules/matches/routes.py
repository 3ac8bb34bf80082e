from __future__ import annotations

from flask import Blueprint, jsonify, request

from ...extensions import db
from ...models.match import Match
from ..items.routes import _item_to_dict

bp = Blueprint("matches", __name__, url_prefix="/matches")


def _match_to_dict(m: Match, include_items: bool = False) -> dict:
    base = m.to_record().to_dict()
    if include_items:
        base["lostItem"] = _item_to_dict(m.lost_item) if m.lost_item else None
        base["foundItem"] = _item_to_dict(m.found_item) if m.found_item else None
    return base


def _int_arg(name: str):
    raw = request.args.get(name)
    if raw is None or raw == "":
        return None
    return int(raw)


@bp.get("")
def list_matches():
    # Optional filters: lostItemId, foundItemId, itemId (either side), status
    q = Match.query
    try:
        lost_id = _int_arg("lostItemId")
        found_id = _int_arg("foundItemId")
        item_id = _int_arg("itemId")
    except ValueError:
        return jsonify({"error": "Item ids must be integers"}), 400
    try:
        limit = int(request.args.get("limit", 200))
    except ValueError:
        limit = 200
    status = request.args.get("status")
    include_items = request.args.get("includeItems") in ("1", "true", "yes")

    if lost_id is not None:
        q = q.filter(Match.lost_item_id == lost_id)
    if found_id is not None:
        q = q.filter(Match.found_item_id == found_id)
    if item_id is not None:
        q = q.filter(db.or_(Match.lost_item_id == item_id, Match.found_item_id == item_id))
    if status:
        q = q.filter(Match.status == status)

    rows = q.order_by(Match.created_at.desc(), Match.id.desc()).limit(max(1, min(500, limit))).all()
    return jsonify({"matches": [_match_to_dict(m, include_items) for m in rows]})


def _transition(match_id: int, status: str):
    m = db.session.get(Match, match_id)
    if not m:
        return jsonify({"error": "Match not found"}), 404
    if m.status != "pending":
        return jsonify({"error": f"Match is already {m.status}"}), 409
    m.status = status
    db.session.commit()
    return jsonify({"match": _match_to_dict(m)})


@bp.post("/<int:match_id>/confirm")
def confirm_match(match_id: int):
    return _transition(match_id, "confirmed")


@bp.post("/<int:match_id>/reject")
def reject_match(match_id: int):
    return _transition(match_id, "rejected")
