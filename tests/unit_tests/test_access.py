"""Unit tests for lifecycle/access.py, lifecycle/membership.py and lifecycle/validators.py."""

import pytest

from hackathon_api.lifecycle.access import ProjectContext
from hackathon_api.lifecycle.access import can_assign_judges
from hackathon_api.lifecycle.access import can_delete_project
from hackathon_api.lifecycle.access import can_lock_project
from hackathon_api.lifecycle.access import can_update_project
from hackathon_api.lifecycle.membership import MembershipAction
from hackathon_api.lifecycle.membership import membership_action
from hackathon_api.lifecycle.validators import validate_more_info
from hackathon_api.models.hackathon import Hackathon
from hackathon_api.models.hacker import Hacker
from hackathon_api.models.project import Project

OWNER = Hacker(id="owner", name="Olive", roles=["user"])
OTHER = Hacker(id="other", name="Uma", roles=["user"])
ADMIN = Hacker(id="admin", name="Ada", roles=["admin"])
JUDGE = Hacker(id="judge", name="Alice", roles=["judge"])
STAFF = Hacker(id="staff", name="Sam", roles=["staff"])


def _project(locked=False, members=None) -> Project:
    return Project(id="p1", version="1", title="P", user_id="owner", locked=locked, members=members or [])


class TestCanUpdateProject:
    """Tests for can_update_project."""

    @pytest.mark.parametrize(
        "hacker,locked,context,expected",
        [
            (OWNER, False, ProjectContext.EDIT, True),
            (OWNER, True, ProjectContext.EDIT, False),
            (OTHER, False, ProjectContext.EDIT, False),
            (ADMIN, True, ProjectContext.EDIT, True),
            (JUDGE, True, ProjectContext.EDIT, True),
            (STAFF, True, ProjectContext.EDIT, True),
            (OTHER, False, ProjectContext.NEW, True),
        ],
        ids=[
            "owner_unlocked",
            "owner_locked",
            "stranger",
            "admin_locked",
            "judge_locked",
            "staff_locked",
            "anyone_new",
        ],
    )
    def test_matrix(self, hacker, locked, context, expected):
        """Test the update permission matrix."""
        assert can_update_project(hacker, _project(locked=locked), context) is expected

    def test_new_without_project(self):
        """Test anyone may open the form for a new project."""
        assert can_update_project(OTHER, None, ProjectContext.NEW) is True

    def test_edit_without_project(self):
        """Test an ordinary hacker cannot edit a project that is not there."""
        assert can_update_project(OWNER, None, ProjectContext.EDIT) is False


class TestCanLockProject:
    """Tests for can_lock_project and can_assign_judges."""

    @pytest.mark.parametrize(
        "hacker,expected",
        [(ADMIN, True), (JUDGE, True), (STAFF, True), (OWNER, False), (OTHER, False)],
    )
    def test_lock(self, hacker, expected):
        """Test only elevated hackers lock or unlock."""
        assert can_lock_project(hacker) is expected

    @pytest.mark.parametrize(
        "hacker,expected",
        [(ADMIN, True), (JUDGE, False), (STAFF, False), (OWNER, False)],
    )
    def test_assign_judges(self, hacker, expected):
        """Test only administrators assign judges."""
        assert can_assign_judges(hacker) is expected


class TestCanDeleteProject:
    """Tests for can_delete_project."""

    @pytest.mark.parametrize(
        "hacker,locked,expected",
        [(OWNER, False, True), (OWNER, True, False), (OTHER, False, False), (STAFF, True, True)],
    )
    def test_matrix(self, hacker, locked, expected):
        """Test the delete permission matrix."""
        assert can_delete_project(hacker, _project(locked=locked)) is expected


class TestMembershipAction:
    """Tests for membership_action."""

    hackathon = Hackathon(id="k1", name="Spring", max_team_size=2)

    def test_join_when_room(self):
        """Test a non-member may join while the team has room."""
        assert membership_action(OTHER, self.hackathon, _project(members=["owner"])) == MembershipAction.JOIN

    def test_leave_when_member(self):
        """Test a member may leave."""
        assert membership_action(OTHER, self.hackathon, _project(members=["other"])) == MembershipAction.LEAVE

    def test_full_team(self):
        """Test nobody joins a full team."""
        project = _project(members=["a", "b"])

        assert membership_action(OTHER, self.hackathon, project) == MembershipAction.NO_CHANGE

    def test_member_of_full_team_may_leave(self):
        """Test a member can still leave a full team."""
        project = _project(members=["other", "b"])

        assert membership_action(OTHER, self.hackathon, project) == MembershipAction.LEAVE

    @pytest.mark.parametrize("hacker", [OTHER, ADMIN, OWNER])
    def test_locked_never_changes(self, hacker):
        """Test locked projects never change membership, for anyone."""
        project = _project(locked=True, members=["other"])

        assert membership_action(hacker, self.hackathon, project) == MembershipAction.NO_CHANGE

    def test_unparsed_team_size_admits_nobody(self, backend, store):
        """Test a max_team_size cell that did not parse lets nobody join, but members may still leave."""
        backend.load("hackathons", [("k9", ("Spring", "", "", "", "", "five", "", "", ""))])
        hackathon = store.hackathons.get("k9")

        assert hackathon.max_team_size == "five"
        assert membership_action(OTHER, hackathon, _project()) == MembershipAction.NO_CHANGE
        assert membership_action(OTHER, hackathon, _project(members=["other"])) == MembershipAction.LEAVE

    def test_missing_context(self):
        """Test a missing hackathon or project means no change."""
        assert membership_action(OTHER, None, _project()) == MembershipAction.NO_CHANGE
        assert membership_action(OTHER, self.hackathon, None) == MembershipAction.NO_CHANGE

    def test_values(self):
        """Test the action values are the three UI states."""
        assert {action.value for action in MembershipAction} == {"join", "leave", "nochange"}


class TestValidateMoreInfo:
    """Tests for validate_more_info."""

    @pytest.mark.parametrize("text", [None, "", "   ", "\0", "http://x", "https://y", "https://"])
    def test_valid(self, text):
        """Test empty, unset and URL-prefixed values pass."""
        assert validate_more_info(text) is None

    @pytest.mark.parametrize("text", ["not a url", "ftp://example.com", "www.example.com", " https://x"])
    def test_invalid(self, text):
        """Test anything else fails with one field-keyed error."""
        assert validate_more_info(text) == {"more_info": "More info must be a URL"}

    def test_project_validate_fields(self):
        """Test the project row reports the same failure."""
        assert Project(title="P", more_info="nope").validate_fields() == {"more_info": "More info must be a URL"}
        assert Project(title="P", more_info="https://ok").validate_fields() == {}
