from .user_admin import CustomUserAdmin
from .role_admin import PermissionAdmin, RoleAdmin, UserRateAdmin

__all__ = [
    'CustomUserAdmin',
    'PermissionAdmin',
    'RoleAdmin',
    'UserRateAdmin'
]
