# type: ignore
"""
Permission catalog tests
========================
Run:  pytest test_permissions.py -v
"""
from meeting_service import permissions as perms
from meeting_service.permissions import (
    ALL_PERMISSIONS, CLAIM_TYPE, Roles, all_permissions, generate_permissions_for_module,
)


class TestGeneratePermissions:
    def test_crud_order(self):
        assert generate_permissions_for_module("Meeting") == [
            "Permissions.Meeting.Create",
            "Permissions.Meeting.View",
            "Permissions.Meeting.Edit",
            "Permissions.Meeting.Delete",
        ]

    def test_arbitrary_module_name(self):
        assert generate_permissions_for_module("Report")[1] == "Permissions.Report.View"

    def test_deterministic(self):
        assert generate_permissions_for_module("X") == generate_permissions_for_module("X")


class TestCatalog:
    def test_notification_is_not_generic_crud(self):
        assert perms.Notification.ALL == (
            "Permissions.Notification.View",
            "Permissions.Notification.Create",
            "Permissions.Notification.Send",
        )
        assert "Permissions.Notification.Send" not in generate_permissions_for_module("Notification")

    def test_partial_groups(self):
        assert not hasattr(perms.User, "DELETE")
        assert not hasattr(perms.UserRole, "EDIT")

    def test_all_permissions_declaration_order(self):
        assert all_permissions()[:3] == list(perms.Notification.ALL)
        assert all_permissions()[-1] == perms.UserRole.DELETE

    def test_all_permissions_count_and_uniqueness(self):
        assert len(ALL_PERMISSIONS) == 3 + 4 + 3 + 4 + 3
        assert len(set(ALL_PERMISSIONS)) == len(ALL_PERMISSIONS)

    def test_all_permissions_returns_copy(self):
        values = all_permissions()
        values.append("Permissions.Bogus.View")
        assert "Permissions.Bogus.View" not in all_permissions()

    def test_every_value_carries_claim_type_prefix(self):
        assert all(v.startswith(f"{CLAIM_TYPE}.") for v in ALL_PERMISSIONS)

    def test_role_names(self):
        assert Roles.ALL == ("SuperAdmin", "Admin", "User")
