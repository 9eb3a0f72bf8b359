"""
Persistence gateway.

The Store is built once at startup and handed to the dispatcher and every
handler. Each call opens its own session and commits on its own; nothing
spans two calls unless the caller uses `transaction()` explicitly.
"""
import logging
from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from workout_bot.errors import ConflictError, NotFoundError, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Store:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Yield a session; commit when the block exits, roll back on any error."""
        db: Session = self.session_factory()
        try:
            yield db
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise ConflictError(str(e.orig)) from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"[Store] Database error: {e}")
            raise StorageError(str(e)) from e
        except (OverflowError, ValueError) as e:
            # Driver-level rejections (out-of-range integers, NUL bytes in strings)
            db.rollback()
            logger.error(f"[Store] Driver rejected value: {e}")
            raise StorageError(str(e)) from e
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    # --- writes ---

    def create(self, obj: T) -> T:
        with self.transaction() as db:
            db.add(obj)
            db.flush()
            db.refresh(obj)
        return obj

    def create_many(self, objs: Iterable[T]) -> List[T]:
        objs = list(objs)
        with self.transaction() as db:
            db.add_all(objs)
            db.flush()
            for obj in objs:
                db.refresh(obj)
        return objs

    # --- reads ---

    def find_by_id(self, model: Type[T], obj_id: int) -> T:
        with self.transaction() as db:
            obj = db.get(model, obj_id)
        if obj is None:
            raise NotFoundError(model.__name__, obj_id)
        return obj

    def find_all(self, model: Type[T]) -> List[T]:
        return self.find_where(model)

    def find_where(self, model: Type[T], *criteria) -> List[T]:
        stmt = select(model).order_by(model.id)
        if criteria:
            stmt = stmt.where(*criteria)
        with self.transaction() as db:
            return list(db.execute(stmt).scalars().all())

    def first_where(self, model: Type[T], *criteria) -> Optional[T]:
        stmt = select(model).where(*criteria).order_by(model.id).limit(1)
        with self.transaction() as db:
            return db.execute(stmt).scalar_one_or_none()

    def count(self, model) -> int:
        stmt = select(func.count()).select_from(model)
        with self.transaction() as db:
            return db.execute(stmt).scalar_one()
