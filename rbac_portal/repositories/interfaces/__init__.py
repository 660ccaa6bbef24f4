from .role import IRoleRepository
from .permission import IPermissionRepository
from .role_permission import IRolePermissionRepository
from .user_role import IUserRoleRepository
from .unit_of_work import IUnitOfWork
