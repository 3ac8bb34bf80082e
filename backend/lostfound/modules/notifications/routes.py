from __future__ import annotations

from datetime import datetime, timezone

from flask import Blueprint, jsonify, request, Response, stream_with_context
import json
import time
from queue import Empty
from ...models.notification import Notification
from ...extensions import db
from .bus import subscribe, unsubscribe

bp = Blueprint("notifications", __name__, url_prefix="/notifications")

KEEPALIVE_SECONDS = 15


def _notif_to_dict(n: Notification) -> dict:
    return {
        "id": n.id,
        "userId": n.user_id,
        "matchId": n.match_id,
        "channel": n.channel,
        "title": n.title,
        "message": n.body,
        "payload": n.payload,
        "status": n.status,
        "read": bool(n.read_at),
        "createdAt": n.created_at.isoformat() if n.created_at else None,
        "readAt": n.read_at.isoformat() if n.read_at else None,
    }


def _user_id_arg():
    raw = request.args.get("userId")
    if not raw:
        return None, (jsonify({"error": "userId required"}), 400)
    try:
        return int(raw), None
    except ValueError:
        return None, (jsonify({"error": "Invalid userId"}), 400)


@bp.get("")
def list_notifications():
    uid, err = _user_id_arg()
    if err:
        return err
    try:
        limit = int(request.args.get("limit", 20))
    except ValueError:
        limit = 20
    rows = (
        Notification.query
        .filter(Notification.user_id == uid)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
        .limit(max(1, min(100, limit)))
        .all()
    )
    return jsonify({"notifications": [_notif_to_dict(n) for n in rows]})


@bp.patch("/<int:notif_id>/read")
def mark_read(notif_id: int):
    n = db.session.get(Notification, notif_id)
    if not n:
        return jsonify({"error": "Not found"}), 404
    user_id_param = request.args.get("userId")
    if user_id_param:
        try:
            if n.user_id != int(user_id_param):
                return jsonify({"error": "Forbidden"}), 403
        except ValueError:
            return jsonify({"error": "Invalid userId"}), 400
    if not n.read_at:
        n.read_at = datetime.now(timezone.utc)
        n.status = "read"
        db.session.commit()
    return jsonify({"notification": _notif_to_dict(n)})


@bp.get("/stream")
def stream_notifications():
    """Server-Sent Events stream of new matches for a user.

    Client subscribes with /notifications/stream?userId=<id>
    """
    uid, err = _user_id_arg()
    if err:
        return err

    q = subscribe(uid)

    def event_stream():
        try:
            yield ": connected\n\n"
            while True:
                try:
                    evt = q.get(timeout=KEEPALIVE_SECONDS)
                except Empty:
                    yield "event: ping\n" + f"data: {json.dumps({'ts': int(time.time())})}\n\n"
                    continue
                yield f"event: {evt.get('type', 'notification')}\n" + f"data: {json.dumps(evt, default=str)}\n\n"
        finally:
            unsubscribe(uid, q)

    headers = {
        "Content-Type": "text/event-stream",
        "Cache-Control": "no-cache",
        "Connection": "keep-alive",
        "X-Accel-Buffering": "no",
    }
    return Response(stream_with_context(event_stream()), headers=headers)
