# src/services/exceptions.py

# --- Business Rule Exceptions ---
class BusinessError(Exception):
    """비즈니스 규칙 위반 시. reason에 사람이 읽을 수 있는 사유를 담습니다."""
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

class BindOwnerNotFoundError(BusinessError):
    """바인딩을 교체할 소유자(사용자 또는 역할)가 존재하지 않을 때"""
    pass

class BindTargetNotFoundError(BusinessError):
    """바인딩 대상 ID가 하나도 존재하지 않을 때"""
    pass
