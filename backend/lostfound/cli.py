from __future__ import annotations

from datetime import date, timedelta

import click
from flask import Flask

from .extensions import db
from .matching import extract_tags

SAMPLE_ITEMS = [
    {
        "title": "iPhone 13 Pro",
        "description": "Black iPhone 13 Pro with cracked screen protector",
        "category": "electronics",
        "type": "lost",
        "location": "University Library, 2nd Floor",
        "contact_info": "john@university.edu",
        "days_ago": 2,
    },
    {
        "title": "Blue Backpack",
        "description": "Navy blue Jansport backpack with laptop compartment",
        "category": "bags",
        "type": "found",
        "location": "Student Center Cafeteria",
        "contact_info": "security@university.edu",
        "days_ago": 1,
    },
]


def register_cli(app: Flask) -> None:
    @app.cli.command("init-db")
    def init_db() -> None:
        """Create tables directly (development only; use `flask db upgrade` elsewhere)."""
        db.create_all()
        click.echo("Tables created")

    @app.cli.command("seed")
    @click.option("--owner", type=int, default=1, show_default=True, help="Owner user id for the sample items.")
    def seed(owner: int) -> None:
        """Insert sample lost/found reports. Seeded items are not matched."""
        from .models.item import Item

        for sample in SAMPLE_ITEMS:
            fields = dict(sample)
            days_ago = fields.pop("days_ago")
            db.session.add(Item(
                owner_user_id=owner,
                occurred_on=date.today() - timedelta(days=days_ago),
                status="active",
                tags=extract_tags(f"{fields['title']} {fields['description']}"),
                **fields,
            ))
        db.session.commit()
        click.echo(f"Seeded {len(SAMPLE_ITEMS)} items")

    @app.cli.command("match")
    @click.argument("item_id", type=int)
    def match(item_id: int) -> None:
        """Run matching for a stored item. Re-running stores duplicate matches."""
        from .services import run_matching

        created = run_matching(item_id)
        for m in created:
            click.echo(f"{m.id}\tlost={m.lost_item_id}\tfound={m.found_item_id}\t{m.confidence:.4f}")
        click.echo(f"{len(created)} match(es) created")
