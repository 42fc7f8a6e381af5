"""Unit tests for sheets/table.py."""

import threading

import pytest

from hackathon_api.exceptions import ConflictError
from hackathon_api.exceptions import NotFoundError
from hackathon_api.exceptions import ValidationError
from hackathon_api.models.project import Project
from hackathon_api.models.registration import Registration
from hackathon_api.sheets.backend import InMemoryBackend
from hackathon_api.sheets.table import SheetTable


@pytest.fixture
def projects():
    """Bare project table over an empty backend."""
    return SheetTable(InMemoryBackend(), Project)


class TestSheetTableCreate:
    """Tests for SheetTable.create."""

    def test_create_assigns_identity_and_version(self, projects):
        """Test a created row carries a fresh identity and version."""
        created = projects.create(Project(title="New"))

        assert created.id
        assert created.version
        assert projects.get(created.id).title == "New"
        assert projects.known_version(created.id) == created.version

    def test_create_runs_prepare(self, projects):
        """Test creation fills the creation date."""
        created = projects.create(Project(title="New"))

        assert created.date_created is not None

    def test_identities_are_unique(self, projects):
        """Test two creates never share an identity."""
        first = projects.create(Project(title="One"))
        second = projects.create(Project(title="Two"))

        assert first.id != second.id

    def test_create_existing_row(self, projects):
        """Test a row that already has an identity cannot be created again."""
        created = projects.create(Project(title="New"))

        with pytest.raises(ConflictError):
            projects.create(created)

    def test_create_invalid_row_persists_nothing(self, projects):
        """Test a failing domain rule blocks the write."""
        with pytest.raises(ValidationError) as exc_info:
            projects.create(Project(title="Bad", more_info="not a url"))

        assert exc_info.value.errors == {"more_info": "More info must be a URL"}
        assert projects.count() == 0

    def test_registration_prepare_marks_attended(self):
        """Test registrations are stamped and marked attended on create."""
        registrations = SheetTable(InMemoryBackend(), Registration)

        created = registrations.create(Registration(user_id="h1", hackathon_id="k1"))

        assert created.attended is True
        assert created.date_registered is not None


class TestSheetTableUpdate:
    """Tests for SheetTable.update."""

    def test_update_bumps_version(self, projects):
        """Test a successful update returns a new version."""
        created = projects.create(Project(title="Old"))
        created.title = "New"

        updated = projects.update(created)

        assert updated.title == "New"
        assert updated.version != created.version
        assert updated.date_created == created.date_created

    def test_stale_update_conflicts_even_with_identical_content(self, projects):
        """Test the version check is not bypassed by equal content."""
        created = projects.create(Project(title="Same"))
        stale = projects.get(created.id)
        projects.update(projects.get(created.id))

        with pytest.raises(ConflictError) as exc_info:
            projects.update(stale)

        assert exc_info.value.expected_version == stale.version
        assert exc_info.value.actual_version == projects.get(created.id).version

    def test_losing_writer_changes_nothing(self, projects):
        """Test a conflicting update leaves the stored row untouched."""
        created = projects.create(Project(title="Base"))
        first = projects.get(created.id)
        second = projects.get(created.id)
        first.title = "First wins"
        projects.update(first)
        second.title = "Second loses"

        with pytest.raises(ConflictError):
            projects.update(second)

        assert projects.get(created.id).title == "First wins"

    def test_update_missing_row(self, projects):
        """Test updating an absent identity raises NotFoundError."""
        with pytest.raises(NotFoundError):
            projects.update(Project(id="missing", version="1", title="Ghost"))

    def test_update_invalid_row(self, projects):
        """Test validation runs before the version check and nothing is written."""
        created = projects.create(Project(title="Valid"))
        created.more_info = "ftp://example.com"

        with pytest.raises(ValidationError):
            projects.update(created)

        assert projects.get(created.id).version == created.version


class TestSheetTableDelete:
    """Tests for SheetTable.delete."""

    def test_delete_then_get(self, projects):
        """Test a deleted row is gone."""
        created = projects.create(Project(title="Doomed"))

        projects.delete(created)

        with pytest.raises(NotFoundError):
            projects.get(created.id)
        assert projects.known_version(created.id) is None

    def test_delete_twice(self, projects):
        """Test deleting an absent row raises NotFoundError."""
        created = projects.create(Project(title="Doomed"))
        projects.delete(created)

        with pytest.raises(NotFoundError):
            projects.delete(created)

    def test_delete_stale(self, projects):
        """Test delete refuses a stale version."""
        created = projects.create(Project(title="Doomed"))
        projects.update(projects.get(created.id))

        with pytest.raises(ConflictError):
            projects.delete(created)
        assert projects.count() == 1

    def test_update_after_delete(self, projects):
        """Test updating a deleted row raises NotFoundError."""
        created = projects.create(Project(title="Doomed"))
        projects.delete(created)

        with pytest.raises(NotFoundError):
            projects.update(created)


class TestSheetTableQueries:
    """Tests for list, filter and count."""

    def test_list_is_a_snapshot(self, projects):
        """Test rows returned by list do not change under later writes."""
        created = projects.create(Project(title="Before"))
        snapshot = projects.list()
        created.title = "After"
        projects.update(created)

        assert snapshot[0].title == "Before"
        assert projects.list()[0].title == "After"

    def test_filter_and_count(self, projects):
        """Test filter applies the predicate to a fresh snapshot."""
        projects.create(Project(title="Keep", hackathon_id="k1"))
        projects.create(Project(title="Skip", hackathon_id="k2"))

        assert [project.title for project in projects.filter(lambda p: p.hackathon_id == "k1")] == ["Keep"]
        assert projects.count() == 2

    def test_table_name_override(self):
        """Test a table can be pointed at a differently named tab."""
        backend = InMemoryBackend()
        archive = SheetTable(backend, Project, table_name="projects_2023")

        archive.create(Project(title="Old"))

        assert len(backend.read_rows("projects_2023")) == 1
        assert backend.read_rows("projects") == []


class TestSheetTableConcurrency:
    """Tests for concurrent writers."""

    def test_concurrent_updates_from_same_version(self, projects):
        """Test exactly one of several writers holding the same version wins."""
        created = projects.create(Project(title="Contended"))
        writers = 8
        barrier = threading.Barrier(writers)
        outcomes = []
        outcomes_lock = threading.Lock()

        def write(index: int):
            row = created.model_copy()
            row.title = f"Writer {index}"
            barrier.wait()
            try:
                projects.update(row)
                result = "ok"
            except ConflictError:
                result = "conflict"
            with outcomes_lock:
                outcomes.append(result)

        threads = [threading.Thread(target=write, args=(index,)) for index in range(writers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert outcomes.count("ok") == 1
        assert outcomes.count("conflict") == writers - 1
