"""Tests for SectionDataService and ProgressTracker over in-memory repositories."""

import pytest

from app.application.dtos.progress import OnboardingProgressResult
from app.application.use_cases.onboarding import ProgressTracker, SectionDataService
from app.domain.enums import OnboardingSection
from app.domain.exceptions import ValidationException

S = OnboardingSection


class TestSectionDataService:
    async def test_save_then_get_returns_payload(self, backend) -> None:
        service = SectionDataService(backend.sections)
        saved = await service.save_section("bp-1", "farm", {"crop_types": ["wheat"]})
        assert saved.section_name == S.FARM
        assert saved.updated_at is not None

        record = await service.get_section("bp-1", S.FARM)
        assert record is not None
        assert record.data == {"crop_types": ["wheat"]}

    async def test_resave_replaces_payload(self, backend) -> None:
        service = SectionDataService(backend.sections)
        await service.save_section("bp-1", S.FARM, {"crop_types": ["wheat"], "water_license": True})
        await service.save_section("bp-1", S.FARM, {"crop_types": ["barley"]})

        records = await service.get_all_sections("bp-1")
        assert len(records) == 1
        assert records[0].data == {"crop_types": ["barley"]}

    async def test_identical_resave_is_idempotent(self, backend) -> None:
        service = SectionDataService(backend.sections)
        payload = {"preferred_method": "email"}
        await service.save_section("bp-1", S.COMMUNICATIONS, payload)
        await service.save_section("bp-1", S.COMMUNICATIONS, payload)
        records = await service.get_all_sections("bp-1")
        assert [r.data for r in records] == [payload]

    async def test_get_missing_section_returns_none(self, backend) -> None:
        service = SectionDataService(backend.sections)
        assert await service.get_section("bp-1", S.STORAGE) is None

    async def test_data_map_has_every_section(self, backend) -> None:
        service = SectionDataService(backend.sections)
        await service.save_section("bp-1", S.FINANCIAL, {"num_employees": 3})
        data_map = await service.get_section_data_map("bp-1")
        assert list(data_map) == list(S)
        assert data_map[S.FINANCIAL] == {"num_employees": 3}
        assert data_map[S.BASIC] == {}

    async def test_unknown_section_rejected_before_write(self, backend) -> None:
        service = SectionDataService(backend.sections)
        with pytest.raises(ValidationException):
            await service.save_section("bp-1", "payroll", {})
        assert backend.sections.rows == {}

    async def test_empty_business_profile_id_rejected(self, backend) -> None:
        service = SectionDataService(backend.sections)
        with pytest.raises(ValidationException):
            await service.save_section("", S.BASIC, {})


class TestProgressTracker:
    async def test_no_progress_before_first_transition(self, backend) -> None:
        tracker = ProgressTracker(backend.progress)
        assert await tracker.get_progress("bp-1") is None
        assert tracker.is_complete(None) is False

    async def test_first_completion_moves_to_farm(self, backend) -> None:
        tracker = ProgressTracker(backend.progress)
        progress = await tracker.mark_step_complete("bp-1", "basic")
        assert progress.completed_steps == [S.BASIC]
        assert progress.current_step == S.FARM

    async def test_completing_every_section(self, backend) -> None:
        tracker = ProgressTracker(backend.progress)
        for section in S:
            progress = await tracker.mark_step_complete("bp-1", section)
        assert progress.current_step == S.COMMUNICATIONS
        assert tracker.is_complete(progress)

    def test_five_sections_with_duplicates_is_not_complete(self) -> None:
        progress = OnboardingProgressResult(
            business_profile_id="bp-1",
            current_step=S.COMMUNICATIONS,
            completed_steps=[S.BASIC, S.FARM, S.FARM, S.FINANCIAL, S.COMPLIANCE, S.STORAGE, S.BASIC],
        )
        assert len(progress.completed_steps) > len(S)
        assert ProgressTracker.is_complete(progress) is False

    async def test_is_section_complete(self, backend) -> None:
        tracker = ProgressTracker(backend.progress)
        progress = await tracker.mark_step_complete("bp-1", S.STORAGE)
        assert tracker.is_section_complete(progress, "storage")
        assert not tracker.is_section_complete(progress, S.BASIC)
        assert not tracker.is_section_complete(None, S.BASIC)

    async def test_unknown_step_rejected(self, backend) -> None:
        tracker = ProgressTracker(backend.progress)
        with pytest.raises(ValidationException):
            await tracker.mark_step_complete("bp-1", "nope")
        assert backend.progress.rows == {}

    def test_navigation(self) -> None:
        assert ProgressTracker.get_next_section("basic") == S.FARM
        assert ProgressTracker.get_next_section(S.COMMUNICATIONS) is None
        assert ProgressTracker.get_previous_section(S.BASIC) is None
        assert ProgressTracker.get_previous_section("communications") == S.STORAGE
