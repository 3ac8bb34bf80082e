from __future__ import annotations

import logging

from flask import Blueprint, current_app, g, jsonify, request
from marshmallow import ValidationError

from ...errors import InvalidItem, StorageUnavailable
from ...extensions import db
from ...matching import extract_tags
from ...models.item import Item
from ...schemas.item import ItemSchema, ItemStatusSchema
from ...services import build_engine
from ...stores import SqlMatchStore

logger = logging.getLogger(__name__)

bp = Blueprint("items", __name__, url_prefix="/items")

_item_schema = ItemSchema()
_status_schema = ItemStatusSchema()

TOP_MATCHES = 5


def _item_to_dict(it: Item) -> dict:
    return {
        "id": it.id,
        "type": it.type,
        "category": it.category,
        "title": it.title,
        "description": it.description,
        "location": it.location,
        "occurredOn": it.occurred_on.isoformat() if it.occurred_on else None,
        "contactInfo": it.contact_info,
        "status": it.status,
        "tags": list(it.tags or []),
        "ownerId": it.owner_user_id,
        "createdAt": it.created_at.isoformat() if it.created_at else None,
        "updatedAt": it.updated_at.isoformat() if it.updated_at else None,
    }


def _enqueue_matching(item_id: int) -> bool:
    try:
        from ...tasks.jobs.matching import match_item
        match_item.delay(item_id)
        return True
    except Exception:
        logger.warning("could not enqueue matching for item %s, running inline", item_id, exc_info=True)
        return False


def _limit_arg(default: int) -> int:
    try:
        limit = int(request.args.get("limit", default))
    except (TypeError, ValueError):
        limit = default
    return max(1, min(100, limit))


def _with_match_counts(items: list[Item]) -> list[dict]:
    matches = SqlMatchStore(db.session)
    return [{**_item_to_dict(it), "matchCount": matches.count_for_item(it.id)} for it in items]


@bp.get("")
def list_items():
    """List items, newest first.

    Query params: type, category, status, search (substring of title or
    description, case-insensitive), location (substring), limit (default 20).
    """
    q = Item.query
    type_param = request.args.get("type")
    if type_param in ("lost", "found"):
        q = q.filter(Item.type == type_param)
    category = request.args.get("category")
    if category:
        q = q.filter(Item.category == category)
    status = request.args.get("status")
    if status:
        q = q.filter(Item.status == status)
    search = (request.args.get("search") or "").strip()
    if search:
        q = q.filter(db.or_(Item.title.ilike(f"%{search}%"), Item.description.ilike(f"%{search}%")))
    location = (request.args.get("location") or "").strip()
    if location:
        q = q.filter(Item.location.ilike(f"%{location}%"))

    items = q.order_by(Item.created_at.desc(), Item.id.desc()).limit(_limit_arg(20)).all()
    return jsonify({"items": _with_match_counts(items)})


@bp.get("/recent")
def recent_items():
    items = Item.query.order_by(Item.created_at.desc(), Item.id.desc()).limit(_limit_arg(6)).all()
    return jsonify({"items": _with_match_counts(items)})


@bp.get("/<int:item_id>")
def get_item(item_id: int):
    it = db.session.get(Item, item_id)
    if not it:
        return jsonify({"error": "Item not found"}), 404
    matches = SqlMatchStore(db.session)
    payload = _item_to_dict(it)
    payload["matchCount"] = matches.count_for_item(it.id)
    payload["matches"] = [m.to_dict() for m in matches.for_item(it.id, limit=TOP_MATCHES)]
    return jsonify(payload)


@bp.post("")
def create_item():
    """Create a lost/found item and match it against active reports of the opposite type.

    Expects JSON: type, category, title, description, and optionally location,
    occurredOn, contactInfo. The owner is the current user (X-User-Id) or, when
    absent, ``ownerId`` from the body.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON body required"}), 400
    try:
        fields = _item_schema.load(data)
    except ValidationError as e:
        return jsonify({"error": "Invalid item", "fields": e.messages}), 400

    owner_id = getattr(g, "current_user_id", None) or fields.get("owner_user_id")
    item = Item(
        type=fields["type"],
        category=fields["category"],
        title=fields["title"],
        description=fields["description"],
        location=fields.get("location"),
        occurred_on=fields.get("occurred_on"),
        contact_info=fields.get("contact_info"),
        owner_user_id=owner_id,
        status="active",
        tags=extract_tags(f"{fields['title']} {fields['description']}"),
    )
    db.session.add(item)
    db.session.commit()

    matches = []
    if not (current_app.config.get("MATCH_ASYNC") and _enqueue_matching(item.id)):
        try:
            matches = build_engine().on_item_created(item.to_record())
        except InvalidItem as e:
            return jsonify({"error": str(e)}), 400
        except StorageUnavailable as e:
            # The item itself is stored; only match persistence failed
            logger.error("matching aborted for item %s: %s", item.id, e)
            return jsonify({"error": "Match storage unavailable", "item": _item_to_dict(item)}), 503

    payload = _item_to_dict(item)
    payload["matches"] = [m.to_dict() for m in matches]
    return jsonify(payload), 201


@bp.patch("/<int:item_id>/status")
def update_status(item_id: int):
    it = db.session.get(Item, item_id)
    if not it:
        return jsonify({"error": "Item not found"}), 404
    try:
        data = _status_schema.load(request.get_json(silent=True) or {})
    except ValidationError as e:
        return jsonify({"error": "Invalid status", "fields": e.messages}), 400
    it.status = data["status"]
    db.session.commit()
    return jsonify(_item_to_dict(it))
