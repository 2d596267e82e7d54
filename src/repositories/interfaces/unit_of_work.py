from abc import ABC, abstractmethod
from typing import ContextManager

class IUnitOfWork(ABC):
    @abstractmethod
    def transaction(self) -> ContextManager[None]:
        """
        하나의 원자적 작업 단위를 여는 컨텍스트 매니저를 반환합니다.

        가장 바깥 블록이 정상 종료되면 커밋하고, 예외가 발생하면 롤백한 뒤 예외를 다시 던집니다.
        이미 열린 트랜잭션 안에서 다시 호출하면 바깥 트랜잭션에 합류합니다.
        """
        pass
