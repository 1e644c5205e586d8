from .role import Permission, Role
from .user import User
from .rate import UserRate


__all__ = [
    'Permission',
    'Role',
    'User',
    'UserRate'
]
