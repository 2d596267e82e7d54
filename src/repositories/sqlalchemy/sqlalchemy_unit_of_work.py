import logging
from contextlib import contextmanager
from typing import Iterator
from sqlalchemy.orm import Session
from src.repositories.interfaces import IUnitOfWork
from src.services.exceptions import BusinessError

logger = logging.getLogger(__name__)

class SqlalchemyUnitOfWork(IUnitOfWork):
    def __init__(self, db_session: Session):
        self.db = db_session
        self._depth = 0

    @contextmanager
    def transaction(self) -> Iterator[None]:
        if self._depth > 0:
            # 바깥 트랜잭션에 합류: 커밋/롤백은 가장 바깥 블록이 담당합니다.
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
            return

        self._depth = 1
        try:
            yield
            self.db.commit()
        except BaseException as exc:
            # 비즈니스 오류는 서비스에서 이미 기록합니다.
            if isinstance(exc, BusinessError):
                logger.debug("Rolling back transaction: %s", exc)
            else:
                logger.warning("Rolling back transaction", exc_info=True)
            self.db.rollback()
            raise
        finally:
            self._depth = 0
