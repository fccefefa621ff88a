from typing import List

from sqlalchemy.orm import Session

from app.model.motivational_content import ContentType, MotivationalContent


class MotivationalContentRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_by_type(self, content_type: ContentType) -> List[MotivationalContent]:
        # stable order so the daily inspiration index means the same quote all day
        return (
            self.db.query(MotivationalContent)
            .filter(MotivationalContent.type == content_type)
            .order_by(MotivationalContent.created_at.asc(), MotivationalContent.id.asc())
            .all()
        )

    def add_all(self, items: List[MotivationalContent]) -> None:
        self.db.add_all(items)
        self.db.commit()
