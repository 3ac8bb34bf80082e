from lostfound.tasks.celery_app import celery_app


@celery_app.task
def match_item(item_id: int) -> list[dict]:
    """Run matching for a stored item inside a fresh app context."""
    from lostfound import create_app
    from lostfound.services import run_matching

    app = create_app()
    with app.app_context():
        return [m.to_dict() for m in run_matching(item_id)]
