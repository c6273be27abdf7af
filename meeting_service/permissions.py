# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Permission catalog, role names and the claim type used for permissions.

The per-module groups are a fixed table: Notification carries
View/Create/Send rather than the generic CRUD set, and not every module has
every verb. ``ALL_PERMISSIONS`` is the ordered registry the seeder grants to
SuperAdmin.
"""
from typing import List, Tuple

CLAIM_TYPE = "Permissions"


class Roles:
    SUPER_ADMIN = "SuperAdmin"
    ADMIN = "Admin"
    USER = "User"

    ALL: Tuple[str, ...] = (SUPER_ADMIN, ADMIN, USER)


def generate_permissions_for_module(module: str) -> List[str]:
    return [
        f"{CLAIM_TYPE}.{module}.Create",
        f"{CLAIM_TYPE}.{module}.View",
        f"{CLAIM_TYPE}.{module}.Edit",
        f"{CLAIM_TYPE}.{module}.Delete",
    ]


class Notification:
    VIEW = "Permissions.Notification.View"
    CREATE = "Permissions.Notification.Create"
    SEND = "Permissions.Notification.Send"

    ALL: Tuple[str, ...] = (VIEW, CREATE, SEND)


class Meeting:
    VIEW = "Permissions.Meeting.View"
    CREATE = "Permissions.Meeting.Create"
    EDIT = "Permissions.Meeting.Edit"
    DELETE = "Permissions.Meeting.Delete"

    ALL: Tuple[str, ...] = (VIEW, CREATE, EDIT, DELETE)


class User:
    VIEW = "Permissions.User.View"
    CREATE = "Permissions.User.Create"
    EDIT = "Permissions.User.Edit"

    ALL: Tuple[str, ...] = (VIEW, CREATE, EDIT)


class Role:
    VIEW = "Permissions.Role.View"
    CREATE = "Permissions.Role.Create"
    EDIT = "Permissions.Role.Edit"
    DELETE = "Permissions.Role.Delete"

    ALL: Tuple[str, ...] = (VIEW, CREATE, EDIT, DELETE)


class UserRole:
    VIEW = "Permissions.UserRole.View"
    CREATE = "Permissions.UserRole.Create"
    DELETE = "Permissions.UserRole.Delete"

    ALL: Tuple[str, ...] = (VIEW, CREATE, DELETE)


PERMISSION_GROUPS = (Notification, Meeting, User, Role, UserRole)

ALL_PERMISSIONS: Tuple[str, ...] = tuple(
    value for group in PERMISSION_GROUPS for value in group.ALL
)


def all_permissions() -> List[str]:
    return list(ALL_PERMISSIONS)
