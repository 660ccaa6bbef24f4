# rbac_portal/utils/set_ops.py
from collections import Counter, defaultdict
from typing import Dict, Iterable, Set, Tuple

from rbac_portal.database import models


def group_types_by_target(permissions: Iterable[models.Permission]) -> Dict[str, Set[str]]:
    """
    요청된 권한들을 target_id 기준으로 묶어, 대상별 permission_type 집합을 만듭니다.
    대상별로 한 번의 존재 여부 조회만 하면 되도록 하기 위한 사전 처리입니다.

    Example:
        [('Create', 'app1'), ('Modify', 'app1'), ('Create', 'app2')]
        -> {'app1': {'Create', 'Modify'}, 'app2': {'Create'}}
    """
    grouped: Dict[str, Set[str]] = defaultdict(set)
    for permission in permissions:
        grouped[permission.target_id].add(permission.permission_type)
    return dict(grouped)


def find_duplicate_pairs(permissions: Iterable[models.Permission]) -> Set[Tuple[str, str]]:
    """같은 요청 안에서 두 번 이상 등장하는 (permission_type, target_id) 쌍을 찾습니다."""
    counts = Counter((p.permission_type, p.target_id) for p in permissions)
    return {pair for pair, count in counts.items() if count > 1}


def user_ids_to_assign(requested: Iterable[str], existing: Iterable[models.UserRole]) -> Set[str]:
    """이미 활성 연결이 있는 사용자를 제외하고, 새로 역할을 부여할 사용자 ID만 반환합니다."""
    return set(requested) - {user_role.user_id for user_role in existing}
