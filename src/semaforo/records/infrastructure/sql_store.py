"""
SQLAlchemy backed record store, instantiated once per record type.
"""
from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy import delete, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..domain import Identity, parse_identity
from ...common.database import TrafficDB, PredictionDB
from ...common.exceptions import PersistenceError, ValidationError
from ...common.logging import get_logger, log_execution_time
from ...common.schemas import TrafficRecord, PredictionRecord

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

Fields = Union[Mapping[str, Any], BaseModel]

# Never written by update
IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


class SqlRecordStore(Generic[RecordT]):
    """
    Generic record store over one declarative model.
    Each operation runs in its own session and transaction; writes are
    committed before the call returns and results are detached pydantic records.
    """

    def __init__(self, session_factory: sessionmaker, model: Type[Any], record_type: Type[RecordT]):
        self.session_factory = session_factory
        self.model = model
        self.record_type = record_type
        self._columns = frozenset(attr.key for attr in inspect(model).column_attrs)

    @property
    def name(self) -> str:
        return self.model.__tablename__

    def _to_record(self, row: Any) -> RecordT:
        return self.record_type.model_validate(row)

    def _clean_fields(self, fields: Fields, allowed: frozenset) -> dict:
        if isinstance(fields, BaseModel):
            fields = fields.model_dump(exclude_unset=True, exclude_none=True)
        values = dict(fields)
        unknown = sorted(set(values) - allowed)
        if unknown:
            raise ValidationError(f"Unknown or read-only fields for {self.name}: {', '.join(unknown)}")
        return values

    def _order(self):
        # Most recent first; id breaks createdAt ties
        return (self.model.created_at.desc(), self.model.id.desc())

    def _fail(self, action: str, error: Exception) -> PersistenceError:
        return PersistenceError(f"Could not {action} {self.name}: {error}")

    @log_execution_time(logger)
    def create(self, fields: Fields) -> RecordT:
        values = self._clean_fields(fields, self._columns - {"id"})
        try:
            with self.session_factory() as session, session.begin():
                row = self.model(**values)
                session.add(row)
                session.flush()
                session.refresh(row)
                record = self._to_record(row)
        except (SQLAlchemyError, OverflowError) as e:
            raise self._fail("create", e) from e
        logger.info(f"Created {self.name} record {record.id}")
        return record

    @log_execution_time(logger)
    def get_by_id(self, record_id: Identity) -> Optional[RecordT]:
        identity = parse_identity(record_id)
        try:
            with self.session_factory() as session:
                row = session.get(self.model, identity)
                return self._to_record(row) if row is not None else None
        except SQLAlchemyError as e:
            raise self._fail("read", e) from e

    @log_execution_time(logger)
    def get_all(self) -> List[RecordT]:
        try:
            with self.session_factory() as session:
                rows = session.scalars(select(self.model).order_by(*self._order())).all()
                return [self._to_record(row) for row in rows]
        except SQLAlchemyError as e:
            raise self._fail("list", e) from e

    @log_execution_time(logger)
    def update(self, record_id: Identity, fields: Fields) -> Optional[RecordT]:
        """
        Applies the given subset of fields. The write and the re-read share one
        transaction, so a concurrent delete cannot turn a successful update
        into a not-found result.
        """
        identity = parse_identity(record_id)
        values = self._clean_fields(fields, self._columns - IMMUTABLE_FIELDS)
        try:
            with self.session_factory() as session, session.begin():
                row = session.get(self.model, identity, with_for_update=True)
                if row is None:
                    return None
                for key, value in values.items():
                    setattr(row, key, value)
                session.flush()
                session.refresh(row)
                record = self._to_record(row)
        except (SQLAlchemyError, OverflowError) as e:
            raise self._fail("update", e) from e
        logger.info(f"Updated {self.name} record {identity}: {sorted(values)}")
        return record

    @log_execution_time(logger)
    def delete(self, record_id: Identity) -> bool:
        identity = parse_identity(record_id)
        try:
            with self.session_factory() as session, session.begin():
                result = session.execute(delete(self.model).where(self.model.id == identity))
                deleted = result.rowcount > 0
        except SQLAlchemyError as e:
            raise self._fail("delete", e) from e
        if deleted:
            logger.info(f"Deleted {self.name} record {identity}")
        return deleted

    @log_execution_time(logger)
    def get_latest(self) -> Optional[RecordT]:
        try:
            with self.session_factory() as session:
                row = session.scalars(select(self.model).order_by(*self._order()).limit(1)).first()
                return self._to_record(row) if row is not None else None
        except SQLAlchemyError as e:
            raise self._fail("read latest", e) from e


def traffic_store(session_factory: sessionmaker) -> SqlRecordStore[TrafficRecord]:
    return SqlRecordStore(session_factory, TrafficDB, TrafficRecord)

def prediction_store(session_factory: sessionmaker) -> SqlRecordStore[PredictionRecord]:
    return SqlRecordStore(session_factory, PredictionDB, PredictionRecord)
