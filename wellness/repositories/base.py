"""
Generic CRUD repository over a SQLModel table with live snapshots.
"""
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, delete, select

from wellness.core.database import Database
from wellness.core.logging_config import log_error
from wellness.models.base import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)
SnapshotCallback = Callable[[List[Any]], None]


class Subscription:
    """Handle returned by ``subscribe``; cancel it to stop receiving snapshots."""

    def __init__(self, repository: "Repository[Any]", callback: SnapshotCallback):
        self._repository = repository
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        if self.active:
            self.active = False
            self._repository._unsubscribe(self)


class Repository(Generic[ModelT]):
    """
    Typed CRUD over one table.

    ``insert`` replaces any row with the same id. Every mutating call pushes
    the fresh ordered list to subscribers.
    """

    model: type[ModelT]

    def __init__(self, database: Database):
        self.database = database
        self._subscriptions: List[Subscription] = []

    def _ordering(self) -> Sequence[Any]:
        raise NotImplementedError

    @staticmethod
    def _commit(session: Session) -> None:
        try:
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            log_error(exc)
            raise

    def insert(self, item: ModelT) -> None:
        with self.database.session() as session:
            session.merge(item)
            self._commit(session)
        self._notify()

    def insert_all(self, items: Sequence[ModelT]) -> None:
        if not items:
            return
        with self.database.session() as session:
            for item in items:
                session.merge(item)
            self._commit(session)
        self._notify()

    def update(self, item: ModelT) -> bool:
        """Overwrite an existing row. Returns False when the id is unknown."""
        with self.database.session() as session:
            if session.get(self.model, item.id) is None:
                return False
            session.merge(item)
            self._commit(session)
        self._notify()
        return True

    def delete(self, item: ModelT) -> bool:
        with self.database.session() as session:
            existing = session.get(self.model, item.id)
            if existing is None:
                return False
            session.delete(existing)
            self._commit(session)
        self._notify()
        return True

    def delete_all(self) -> None:
        with self.database.session() as session:
            session.exec(delete(self.model))
            self._commit(session)
        self._notify()

    def get_all(self) -> List[ModelT]:
        with self.database.session() as session:
            statement = select(self.model).order_by(*self._ordering())
            return list(session.exec(statement).all())

    def get_by_id(self, item_id: str) -> Optional[ModelT]:
        with self.database.session() as session:
            return session.get(self.model, item_id)

    def subscribe(self, callback: SnapshotCallback) -> Subscription:
        """Deliver the current list now and again after every mutation."""
        subscription = Subscription(self, callback)
        callback(self.get_all())
        self._subscriptions.append(subscription)
        return subscription

    def _unsubscribe(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def _notify(self) -> None:
        if not self._subscriptions:
            return
        snapshot = self.get_all()
        for subscription in list(self._subscriptions):
            try:
                subscription.callback(list(snapshot))
            except Exception as exc:  # keep one subscriber from breaking the others
                log_error(exc, repository=type(self).__name__)
