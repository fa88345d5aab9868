from sqlalchemy.orm import Session


class BaseRepository:
    """Repositories share the caller's session; the caller owns the transaction."""

    def __init__(self, db: Session):
        self.db = db

    def flush(self) -> None:
        self.db.flush()
