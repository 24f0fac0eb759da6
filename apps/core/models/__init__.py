from .union import Union, BusinessType
from .user import User, UserPropertyUnit, MemberInvite

__all__ = [
    "Union",
    "BusinessType",
    "User",
    "UserPropertyUnit",
    "MemberInvite",
]
