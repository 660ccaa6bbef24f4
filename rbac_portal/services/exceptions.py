# rbac_portal/services/exceptions.py

# --- Uniqueness Exceptions ---
class AlreadyExistsError(Exception):
    """유일성 제약을 위반했을 때"""
    pass

class RoleAlreadyExistsError(AlreadyExistsError):
    """같은 이름의 역할이 이미 존재할 때"""
    pass

class PermissionAlreadyExistsError(AlreadyExistsError):
    """같은 (permission_type, target_id) 권한이 이미 존재하거나 요청 안에서 중복될 때"""
    pass

class RoleAlreadyAssignedError(AlreadyExistsError):
    """동시 요청으로 같은 사용자-역할 활성 레코드가 이미 생성되었을 때"""
    pass

# --- Lookup Exceptions ---
class NotFoundError(Exception):
    """참조한 대상을 찾을 수 없을 때"""
    pass

class RoleNotFoundError(NotFoundError):
    """역할을 찾을 수 없을 때"""
    pass
