"""
Unit tests for ActivationListComponent.
"""
import uuid

import pytest

from activations.components import ActivationListComponent, Deleted, Rejected
from core.domain.exceptions import LicenseAccessDeniedError


@pytest.fixture
def component(license, license_repo, activation_repo, viewer_id):
    return ActivationListComponent(
        license_id=license.id,
        viewer_id=viewer_id,
        license_repository=license_repo,
        activation_repository=activation_repo,
    )


@pytest.mark.asyncio
class TestRefresh:
    """Tests for ActivationListComponent.refresh."""

    async def test_loads_rows_oldest_first(self, component, activations):
        rows = await component.refresh()

        assert [a.name for a in rows] == ["MacBook", "Office PC"]
        assert component.activations == rows

    async def test_foreign_license_refused(
        self, foreign_license, license_repo, activation_repo, viewer_id
    ):
        component = ActivationListComponent(
            foreign_license.id, viewer_id, license_repo, activation_repo
        )

        with pytest.raises(LicenseAccessDeniedError):
            await component.refresh()


@pytest.mark.asyncio
class TestDelete:
    """Tests for ActivationListComponent.delete."""

    async def test_delete_macbook_leaves_office_pc(self, component, activations):
        macbook, office_pc = activations
        await component.refresh()

        outcome = await component.delete(macbook.id)

        assert isinstance(outcome, Deleted)
        assert outcome.activation == macbook
        assert component.activations == [office_pc]
        assert macbook.id in component.deleted_ids

    async def test_delete_twice_is_not_found(self, component, activations):
        await component.delete(activations[0].id)

        outcome = await component.delete(activations[0].id)

        assert isinstance(outcome, Rejected)
        assert outcome.code == "ACTIVATION_NOT_FOUND"
        assert outcome.status_code == 404
        assert [a.name for a in component.activations] == ["Office PC"]

    async def test_delete_of_other_license_is_unauthorized(
        self, component, activations, foreign_activation, activation_repo
    ):
        await component.refresh()

        outcome = await component.delete(foreign_activation.id)

        assert isinstance(outcome, Rejected)
        assert outcome.code == "ACTIVATION_ACCESS_DENIED"
        assert outcome.unauthorized
        assert outcome.status_code == 403
        assert component.activations == activations
        assert foreign_activation.id in activation_repo.activations

    async def test_license_of_other_viewer_is_unauthorized(
        self, foreign_license, foreign_activation, license_repo, activation_repo, viewer_id
    ):
        component = ActivationListComponent(
            foreign_license.id, viewer_id, license_repo, activation_repo
        )

        outcome = await component.delete(foreign_activation.id)

        assert outcome.code == "LICENSE_ACCESS_DENIED"
        assert outcome.license_level
        assert component.activations == []
        assert foreign_activation.id in activation_repo.activations

    async def test_missing_license(self, license_repo, activation_repo, viewer_id):
        component = ActivationListComponent(uuid.uuid4(), viewer_id, license_repo, activation_repo)

        outcome = await component.delete(uuid.uuid4())

        assert outcome.code == "LICENSE_NOT_FOUND"
        assert not outcome.unauthorized

    async def test_stale_read_does_not_resurrect_deleted_row(
        self, component, activations, activation_repo
    ):
        macbook, office_pc = activations
        stale_snapshot = list(activations)

        await component.delete(macbook.id)

        async def stale_read(license_id):
            return stale_snapshot

        activation_repo.find_all_by_license = stale_read
        rows = await component.refresh()

        assert rows == [office_pc]

    async def test_ids_deleted_by_an_earlier_request_stay_hidden(
        self, license, activations, license_repo, activation_repo, viewer_id
    ):
        macbook, office_pc = activations
        deleting = ActivationListComponent(license.id, viewer_id, license_repo, activation_repo)
        await deleting.delete(macbook.id)
        # A later request reads a snapshot taken before the delete committed.
        activation_repo.activations[macbook.id] = macbook

        polling = ActivationListComponent(
            license.id, viewer_id, license_repo, activation_repo, deleted_ids=deleting.deleted_ids
        )
        rows = await polling.refresh()

        assert rows == [office_pc]


class TestRender:
    """Tests for the rendered fragment."""

    def test_empty_list_shows_placeholder(self, component):
        html = component.render()

        assert "Product has not been activated." in html
        assert "<table" not in html

    def test_rows(self, component, activations):
        component.activations = list(activations)

        html = component.render()

        assert "<table" in html
        assert "MacBook" in html
        assert "Office PC" in html
        assert activations[0].created_at.strftime("%Y-%m-%d %H:%M:%S") in html
        assert html.count(">Delete</button>") == 2
        assert 'data-poll-interval="5000"' in html

    def test_rejection_message(self, component):
        html = component.render(rejected=Rejected(reason="Activation not found", code="ACTIVATION_NOT_FOUND"))

        assert 'data-code="ACTIVATION_NOT_FOUND"' in html
        assert "Activation not found" in html
        assert "Product has not been activated." in html

    def test_license_rejection_shows_only_the_error(self, component):
        rejected = Rejected(
            reason="License not found",
            code="LICENSE_NOT_FOUND",
            license_level=True,
        )

        html = component.render(rejected=rejected)

        assert 'data-code="LICENSE_NOT_FOUND"' in html
        assert "Product has not been activated." not in html
        assert "<table" not in html
