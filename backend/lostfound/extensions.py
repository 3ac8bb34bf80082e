from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
import os

DEV_ORIGINS = [
	"http://localhost:5173",
	"http://127.0.0.1:5173",
	"http://localhost:3000",
	"http://127.0.0.1:3000",
]


def cors_origins() -> list[str]:
	"""Allowed origins from CORS_ALLOW_ORIGINS (comma-separated).

	Falls back to local dev servers outside production; production without the
	variable allows no cross-origin callers.
	"""
	raw = os.getenv("CORS_ALLOW_ORIGINS", "").strip()
	origins = [o.strip() for o in raw.split(",") if o.strip()]
	if origins:
		return origins
	if os.getenv("FLASK_ENV", "development").lower() == "production":
		return []
	return list(DEV_ORIGINS)


db = SQLAlchemy()
migrate = Migrate()
# The SSE stream is read cross-origin by the web client too
cors = CORS(resources={r"/api/*": {"origins": cors_origins()}, r"/health": {"origins": "*"}})
