from dataclasses import dataclass


@dataclass(frozen=True)
class UserInfo:
    """역할 보유자 조회 결과로 돌려주는 사용자 투영(projection). 저장되지 않습니다."""
    user_id: str
