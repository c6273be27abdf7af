# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""First-run bootstrap: canonical roles, default accounts and their permission claims.

``Seeder.initial`` is best-effort and non-fatal. Each phase logs and swallows
its own failure so a broken or half-seeded database never blocks startup.
Claims are granted only when an account is first created; re-running against
existing accounts is a no-op.
"""
from typing import Dict, List, Sequence

from meeting_service import permissions as perms
from meeting_service.core.logging import get_logger
from meeting_service.core.security import HashService
from meeting_service.metrics import SEED_FAILURES
from meeting_service.permissions import CLAIM_TYPE, Roles
from meeting_service.repositories.base import utcnow
from meeting_service.repositories.claim_repository import ClaimRepository
from meeting_service.repositories.role_repository import RoleRepository
from meeting_service.repositories.user_repository import UserRepository

logger = get_logger(__name__)

ADMIN_PERMISSIONS: Sequence[str] = (
    perms.Notification.VIEW,
    perms.Notification.CREATE,
    perms.Notification.SEND,

    perms.Meeting.VIEW,
    perms.Meeting.CREATE,
    perms.Meeting.EDIT,

    perms.Role.VIEW,
    perms.Role.CREATE,
    perms.Role.EDIT,

    perms.User.VIEW,
    perms.User.CREATE,
    perms.User.EDIT,

    perms.UserRole.VIEW,
    perms.UserRole.CREATE,
)

USER_PERMISSIONS: Sequence[str] = (
    perms.Meeting.VIEW,
    perms.Notification.VIEW,
    perms.Role.VIEW,
)

DEFAULT_ACCOUNTS: Sequence[Dict[str, str]] = (
    {"username": "SuperAdmin", "email": "superadmin@gmail.com", "phone": "123456780", "role": Roles.SUPER_ADMIN},
    {"username": "Admin", "email": "admin@gmail.com", "phone": "123456780", "role": Roles.ADMIN},
    {"username": "User", "email": "user@gmail.com", "phone": "123456780", "role": Roles.USER},
)


class Seeder:
    def __init__(self, role_repo: RoleRepository, user_repo: UserRepository,
                 claim_repo: ClaimRepository, hash_service: HashService,
                 default_password: str = "1234"):
        self._roles = role_repo
        self._users = user_repo
        self._claims = claim_repo
        self._hash = hash_service
        self._default_password = default_password

    def initial(self) -> None:
        """Seed roles, then default accounts. Never raises."""
        logger.info("Bootstrap seeding started")
        self.seed_roles()
        self.seed_default_users()
        logger.info("Bootstrap seeding finished")

    # ── Roles ──────────────────────────────────────────────────────────

    def seed_roles(self) -> None:
        try:
            created = self._roles.ensure_roles(Roles.ALL, utcnow())
            logger.info("Role phase complete, %d new role(s)", created)
        except Exception as exc:
            SEED_FAILURES.labels(phase="roles").inc()
            logger.warning("Role seeding failed, continuing: %s", exc)

    # ── Accounts ───────────────────────────────────────────────────────

    def seed_default_users(self) -> None:
        for account in DEFAULT_ACCOUNTS:
            try:
                self._seed_account(account)
            except Exception as exc:
                SEED_FAILURES.labels(phase="accounts").inc()
                logger.warning("Seeding account %s failed, continuing: %s", account["username"], exc)

    def _seed_account(self, account: Dict[str, str]) -> None:
        if self._users.get_user_by_username(account["username"]) is not None:
            return

        now = utcnow()
        self._users.create_user(
            username=account["username"],
            email=account["email"],
            phone=account["phone"],
            password_hash=self._hash.convert_to_hash(self._default_password),
            now=now,
        )
        user = self._users.get_user_by_username(account["username"])
        role = self._roles.get_role_by_name(account["role"])
        if user is not None and role is not None:
            self._users.add_user_role(user["id"], role["id"], now)
        logger.info("Created default account %s", account["username"])

        if account["role"] == Roles.SUPER_ADMIN:
            self.seed_claims_for_super_admin()
        elif account["role"] == Roles.ADMIN:
            self._grant(Roles.ADMIN, ADMIN_PERMISSIONS)
        else:
            self._grant(Roles.USER, USER_PERMISSIONS)

    # ── Claims ─────────────────────────────────────────────────────────

    def seed_claims_for_super_admin(self) -> None:
        try:
            self._grant(Roles.SUPER_ADMIN, perms.all_permissions())
        except Exception as exc:
            SEED_FAILURES.labels(phase="super_admin_claims").inc()
            logger.warning("SuperAdmin claim seeding failed, continuing: %s", exc)

    def _grant(self, role_name: str, values: Sequence[str]) -> List[str]:
        """Add each permission the role does not already hold; returns the ones added."""
        role = self._roles.get_role_by_name(role_name)
        if role is None:
            return []
        existing = {
            c["claim_value"] for c in self._claims.list_claims(role["id"])
            if c["claim_type"] == CLAIM_TYPE
        }
        added: List[str] = []
        for value in values:
            if value in existing:
                continue
            if self._claims.add_permission_claim(role, value):
                added.append(value)
            existing.add(value)
        logger.info("Granted %d permission(s) to %s", len(added), role_name)
        return added
