"""Authorization for routing configuration changes.

The relayer does not know about roles. It is given an Authorizer at
construction and asks it whether a caller may mutate the routing table.
RoleBasedAuthorizer is the standard implementation: callers holding the
governor role are authorized, and role membership is itself managed by
holders of the default admin role.
"""

from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable

import structlog

from relayer.constants import DEFAULT_ADMIN_ROLE, GOVERNOR_ROLE
from relayer.errors import Unauthorized
from relayer.models.types import is_zero_address, normalize_address

logger = structlog.get_logger()


@runtime_checkable
class Authorizer(Protocol):
    """Decides whether a caller may change routing configuration."""

    def is_authorized(self, caller: str) -> bool: ...


class RoleBasedAuthorizer:
    """Role membership table with an admin role that manages every role.

    Args:
        admin: Account granted DEFAULT_ADMIN_ROLE. Without one, membership is fixed
        governors: Accounts granted the authorizing role up front
        role: The role that is_authorized() checks (GOVERNOR_ROLE)
    """

    def __init__(
        self,
        admin: str | None = None,
        governors: list[str] | None = None,
        role: str = GOVERNOR_ROLE,
    ) -> None:
        self.role = role
        self._members: dict[str, set[str]] = {}
        if not is_zero_address(admin):
            self._members[DEFAULT_ADMIN_ROLE] = {normalize_address(admin)}
        self._lock = threading.Lock()
        for governor in governors or []:
            self._members.setdefault(role, set()).add(normalize_address(governor))

    def has_role(self, role: str, account: str) -> bool:
        if is_zero_address(account):
            return False
        with self._lock:
            return normalize_address(account) in self._members.get(role, set())

    def get_role_admin(self, role: str) -> str:
        """Role whose holders may grant and revoke `role`."""
        return DEFAULT_ADMIN_ROLE

    def _check_admin(self, caller: str, role: str) -> None:
        admin_role = self.get_role_admin(role)
        if not self.has_role(admin_role, caller):
            logger.warning("role_change_rejected", caller=caller, role=role)
            raise Unauthorized(caller, admin_role)

    def grant_role(self, caller: str, role: str, account: str) -> None:
        """Grant `role` to `account`.

        Raises:
            Unauthorized: If caller does not hold the role's admin role
        """
        self._check_admin(caller, role)
        if is_zero_address(account):
            raise ValueError("Cannot grant a role to the zero address")
        with self._lock:
            self._members.setdefault(role, set()).add(normalize_address(account))
        logger.info("role_granted", role=role, account=account, caller=caller)

    def revoke_role(self, caller: str, role: str, account: str) -> None:
        """Revoke `role` from `account`. Revoking an absent member is a no-op.

        Raises:
            Unauthorized: If caller does not hold the role's admin role
        """
        self._check_admin(caller, role)
        with self._lock:
            self._members.get(role, set()).discard(normalize_address(account))
        logger.info("role_revoked", role=role, account=account, caller=caller)

    def is_authorized(self, caller: str) -> bool:
        return self.has_role(self.role, caller)


__all__ = ["Authorizer", "RoleBasedAuthorizer"]
