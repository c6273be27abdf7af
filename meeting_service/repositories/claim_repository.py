# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Role-claim store: permission claims attached to roles."""
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.engine import Engine

from meeting_service.core.logging import get_logger
from meeting_service.core.schema import role_claims
from meeting_service.permissions import CLAIM_TYPE
from meeting_service.repositories.base import insert_if_absent

logger = get_logger(__name__)


class ClaimRepository:
    def __init__(self, engine: Engine):
        self._engine = engine

    def add_permission_claim(self, role: Dict[str, Any], value: str) -> bool:
        """Grant ``value`` to ``role``. Errors propagate to the caller.

        The unique (role, type, value) constraint makes a repeated grant a
        no-op; the return value says whether a row was written.
        """
        with self._engine.begin() as conn:
            inserted = insert_if_absent(
                conn, role_claims,
                {"role_id": role["id"], "claim_type": CLAIM_TYPE, "claim_value": value},
                conflict_columns=("role_id", "claim_type", "claim_value"),
            )
        if inserted:
            logger.debug("Granted %s to role %s", value, role["name"])
        return inserted

    def list_claims(self, role_id: int) -> List[Dict[str, Any]]:
        with self._engine.connect() as conn:
            rows = conn.execute(
                select(role_claims)
                .where(role_claims.c.role_id == role_id)
                .order_by(role_claims.c.id)
            ).mappings().all()
        return [
            {"id": r["id"], "role_id": r["role_id"],
             "claim_type": r["claim_type"], "claim_value": r["claim_value"]}
            for r in rows
        ]

    def list_permission_values(self, role_id: int) -> List[str]:
        return [c["claim_value"] for c in self.list_claims(role_id)
                if c["claim_type"] == CLAIM_TYPE]
