from .role import Role
from .permission import Permission
from .role_permission import RolePermission
from .user_role import UserRole

__all__ = ["Role", "Permission", "RolePermission", "UserRole"]
