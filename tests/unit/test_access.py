"""Tests for role-based authorization."""

import pytest

from relayer.access import Authorizer, RoleBasedAuthorizer
from relayer.constants import DEFAULT_ADMIN_ROLE, GOVERNOR_ROLE
from relayer.errors import Unauthorized
from tests.helpers import ADMIN, GOVERNOR, OUTSIDER, ZERO


class TestRoleBasedAuthorizer:
    def test_satisfies_authorizer_protocol(self, authorizer: RoleBasedAuthorizer):
        assert isinstance(authorizer, Authorizer)

    def test_initial_roles(self, authorizer: RoleBasedAuthorizer):
        assert authorizer.has_role(DEFAULT_ADMIN_ROLE, ADMIN)
        assert authorizer.has_role(GOVERNOR_ROLE, GOVERNOR)
        assert not authorizer.has_role(GOVERNOR_ROLE, OUTSIDER)

    def test_is_authorized_checks_governor_role(self, authorizer: RoleBasedAuthorizer):
        assert authorizer.is_authorized(GOVERNOR)
        assert not authorizer.is_authorized(OUTSIDER)
        # Admin manages roles but is not itself a governor
        assert not authorizer.is_authorized(ADMIN)

    def test_case_insensitive_accounts(self, authorizer: RoleBasedAuthorizer):
        assert authorizer.is_authorized(GOVERNOR.upper().replace("0X", "0x"))

    def test_zero_address_never_authorized(self, authorizer: RoleBasedAuthorizer):
        assert not authorizer.is_authorized(ZERO)

    def test_admin_grants_and_revokes(self, authorizer: RoleBasedAuthorizer):
        authorizer.grant_role(ADMIN, GOVERNOR_ROLE, OUTSIDER)
        assert authorizer.is_authorized(OUTSIDER)

        authorizer.revoke_role(ADMIN, GOVERNOR_ROLE, OUTSIDER)
        assert not authorizer.is_authorized(OUTSIDER)

    def test_revoke_absent_member_is_noop(self, authorizer: RoleBasedAuthorizer):
        authorizer.revoke_role(ADMIN, GOVERNOR_ROLE, OUTSIDER)
        assert not authorizer.is_authorized(OUTSIDER)

    def test_non_admin_cannot_grant(self, authorizer: RoleBasedAuthorizer):
        with pytest.raises(Unauthorized):
            authorizer.grant_role(GOVERNOR, GOVERNOR_ROLE, OUTSIDER)
        assert not authorizer.is_authorized(OUTSIDER)

    def test_non_admin_cannot_revoke(self, authorizer: RoleBasedAuthorizer):
        with pytest.raises(Unauthorized):
            authorizer.revoke_role(OUTSIDER, GOVERNOR_ROLE, GOVERNOR)
        assert authorizer.is_authorized(GOVERNOR)

    def test_cannot_grant_to_zero_address(self, authorizer: RoleBasedAuthorizer):
        with pytest.raises(ValueError):
            authorizer.grant_role(ADMIN, GOVERNOR_ROLE, ZERO)

    def test_without_admin_membership_is_fixed(self):
        authorizer = RoleBasedAuthorizer(governors=[GOVERNOR])
        assert authorizer.is_authorized(GOVERNOR)
        with pytest.raises(Unauthorized):
            authorizer.grant_role(GOVERNOR, GOVERNOR_ROLE, OUTSIDER)

    def test_custom_role(self):
        authorizer = RoleBasedAuthorizer(admin=ADMIN, role="ROUTER_ADMIN")
        authorizer.grant_role(ADMIN, "ROUTER_ADMIN", OUTSIDER)
        assert authorizer.is_authorized(OUTSIDER)
        assert authorizer.get_role_admin("ROUTER_ADMIN") == DEFAULT_ADMIN_ROLE
