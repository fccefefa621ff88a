# create_tables.py
from sqlalchemy import inspect

from app.config import get_settings
from app.database.base_class import Base
from app.database.session import build_sqlalchemy_database_url_from_settings, get_engine, get_local_session
from app.log import configure_logging, get_logger
from app.model import users, goals, milestones, progress_updates, motivational_content  # noqa: F401
from app.model.motivational_content import ContentType, MotivationalContent
from app.repository import MotivationalContentRepository

log = get_logger("create_tables")

SEED_CONTENT = [
    (ContentType.quote, None, "The secret of getting ahead is getting started.", "Mark Twain", "motivation"),
    (ContentType.quote, None, "It always seems impossible until it's done.", "Nelson Mandela", "perseverance"),
    (ContentType.quote, None, "Small deeds done are better than great deeds planned.", "Peter Marshall", "action"),
    (ContentType.tip, "Make it specific", "Write down exactly what success looks like and by when.", None, "goal-setting"),
    (ContentType.tip, "Break it down", "Split a big goal into milestones you can finish in a week.", None, "goal-setting"),
    (ContentType.tip, "Tailor every application", "Match your CV to the words used in the job advert.", None, "employment"),
    (ContentType.tip, "Practise little and often", "Twenty minutes a day beats a long session once a week.", None, "skills"),
    (ContentType.tip, "Protect your rest", "Plan breaks and sleep like you plan your tasks.", None, "wellbeing"),
]


def main() -> None:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    engine = get_engine(build_sqlalchemy_database_url_from_settings(settings))

    Base.metadata.create_all(bind=engine)
    log.info("Tables created: %s", inspect(engine).get_table_names())

    db = get_local_session(engine)()
    try:
        repo = MotivationalContentRepository(db)
        if repo.list_by_type(ContentType.quote) or repo.list_by_type(ContentType.tip):
            log.info("Motivational content already present, skipping seed")
            return
        repo.add_all([
            MotivationalContent(type=t, title=title, content=content, author=author, category=category)
            for t, title, content, author, category in SEED_CONTENT
        ])
        log.info("Seeded %d motivational content rows", len(SEED_CONTENT))
    finally:
        db.close()


if __name__ == "__main__":
    main()
