from flask import Blueprint, Flask, g, jsonify, request

from ...errors import InvalidItem, StorageUnavailable
from ...modules.items.routes import bp as items_bp
from ...modules.matches.routes import bp as matches_bp
from ...modules.notifications.routes import bp as notifications_bp


def register_api(app: Flask) -> None:
    api_v1 = Blueprint("api_v1", __name__, url_prefix="/api/v1")

    # No authentication here: the fronting host identifies the caller with an
    # `X-User-Id` header (or `Authorization: User <id>`), used as the item owner.
    @api_v1.before_request  # type: ignore
    def _load_current_user():  # pragma: no cover - simple request context helper
        uid: int | None = None
        auth = request.headers.get("Authorization") or ""
        raw = request.headers.get("X-User-Id") or ""
        if not raw and auth.lower().startswith("user "):
            raw = auth[5:].strip()
        if raw:
            try:
                cand = int(raw)
                if cand > 0:
                    uid = cand
            except ValueError:
                uid = None
        g.current_user_id = uid  # type: ignore[attr-defined]

    @api_v1.errorhandler(InvalidItem)
    def _invalid_item(e: InvalidItem):
        return jsonify({"error": str(e)}), 400

    @api_v1.errorhandler(StorageUnavailable)
    def _storage_unavailable(e: StorageUnavailable):
        return jsonify({"error": "Storage unavailable"}), 503

    # Mount feature blueprints
    api_v1.register_blueprint(items_bp)
    api_v1.register_blueprint(matches_bp)
    api_v1.register_blueprint(notifications_bp)

    app.register_blueprint(api_v1)
