"""
Tests unitaires pour les use cases des beats.
"""

import pytest

from backoffice.application.use_cases.beats import (
    CreateBeatRequest,
    CreateBeatUseCase,
    DeleteBeatUseCase,
    GetBeatUseCase,
    ListBeatsRequest,
    ListBeatsUseCase,
    UpdateBeatRequest,
    UpdateBeatUseCase,
)
from backoffice.domain.ports.repository import ListResult


class TestCreateBeatUseCase:
    """Tests pour CreateBeatUseCase."""

    @pytest.fixture
    def use_case(self, unit_of_work, activity_logger):
        return CreateBeatUseCase(unit_of_work, activity_logger)

    @pytest.fixture
    def request_(self):
        return CreateBeatRequest(
            media_url="https://cdn.example.com/beat.mp4",
            thumbnail_url="https://cdn.example.com/beat.jpg",
            influencer_id=10,
            brand_id=20,
            caption="Summer launch",
        )

    async def test_create(self, use_case, repos, request_, sample_influencer, sample_brand,
                          sample_beat, activity_logger):
        repos.influencers.find_by_id.return_value = sample_influencer
        repos.brands.find_by_id.return_value = sample_brand
        repos.beats.find_by_id.return_value = sample_beat

        result = await use_case.execute(request_)

        assert result.success
        assert result.value.influencer.username == "sara"
        assert result.value.brand.name_en == "Acme"
        created = repos.beats.create.call_args.args[0]
        assert created.status_key == "active"
        activity_logger.log_create.assert_awaited_once()

    async def test_missing_influencer(self, use_case, repos, request_, sample_brand):
        repos.brands.find_by_id.return_value = sample_brand

        result = await use_case.execute(request_)

        assert result.code == "BEAT_INFLUENCER_NOT_FOUND"
        repos.beats.create.assert_not_called()

    async def test_missing_brand(self, use_case, repos, request_, sample_influencer):
        repos.influencers.find_by_id.return_value = sample_influencer

        result = await use_case.execute(request_)

        assert result.code == "BEAT_BRAND_NOT_FOUND"


class TestListBeatsUseCase:
    """Tests pour ListBeatsUseCase."""

    async def test_filters_and_search(self, repos, sample_beat):
        repos.beats.list.return_value = ListResult([sample_beat], 12, 1)

        result = await ListBeatsUseCase(repos.beats).execute(ListBeatsRequest(
            search="acme", brand_id=20, status_key="active",
        ))

        assert result.value.meta.total == 12
        assert result.value.data[0].brand.name_en == "Acme"
        spec = repos.beats.list.call_args.args[0]
        assert [c.field for c in spec.criteria] == ["brand_id", "status_key"]
        assert "brand.name_en" in spec.search.fields
        assert "influencer.username" in spec.search.fields
        assert set(spec.includes) == {"influencer", "brand"}

    async def test_default_page_size(self, repos):
        await ListBeatsUseCase(repos.beats).execute()

        spec = repos.beats.list.call_args.args[0]
        assert spec.pagination.limit == 10
        assert spec.criteria == []


class TestGetBeatUseCase:

    async def test_found(self, repos, sample_beat):
        repos.beats.find_by_id.return_value = sample_beat

        result = await GetBeatUseCase(repos.beats).execute(30)

        assert result.value.caption == "Summer launch"

    async def test_not_found(self, repos):
        result = await GetBeatUseCase(repos.beats).execute(99)

        assert result.code == "BEAT_NOT_FOUND"


class TestUpdateBeatUseCase:
    """Tests pour UpdateBeatUseCase."""

    @pytest.fixture
    def use_case(self, unit_of_work, activity_logger):
        return UpdateBeatUseCase(unit_of_work, activity_logger)

    async def test_update_caption(self, use_case, repos, sample_beat, activity_logger):
        repos.beats.find_by_id.return_value = sample_beat

        result = await use_case.execute(UpdateBeatRequest(30, caption="Winter launch"))

        assert result.value.caption == "Winter launch"
        repos.influencers.find_by_id.assert_not_called()
        repos.brands.find_by_id.assert_not_called()
        _, _, before, after = activity_logger.log_update.call_args.args
        assert before["caption"] == "Summer launch"
        assert after["caption"] == "Winter launch"

    async def test_same_references_not_rechecked(self, use_case, repos, sample_beat):
        repos.beats.find_by_id.return_value = sample_beat

        result = await use_case.execute(UpdateBeatRequest(30, influencer_id=10, brand_id=20))

        assert result.success
        repos.brands.find_by_id.assert_not_called()

    async def test_new_brand_missing(self, use_case, repos, sample_beat):
        repos.beats.find_by_id.return_value = sample_beat

        result = await use_case.execute(UpdateBeatRequest(30, brand_id=21))

        assert result.code == "BEAT_BRAND_NOT_FOUND"
        repos.beats.update.assert_not_called()

    async def test_not_found(self, use_case):
        result = await use_case.execute(UpdateBeatRequest(99, caption="x"))

        assert result.code == "BEAT_NOT_FOUND"


class TestDeleteBeatUseCase:

    async def test_delete(self, repos, sample_beat, activity_logger):
        repos.beats.find_by_id.return_value = sample_beat

        result = await DeleteBeatUseCase(repos.beats, activity_logger).execute(30)

        assert result.success
        repos.beats.delete.assert_awaited_once_with(30)
        activity_logger.log_delete.assert_awaited_once()

    async def test_not_found(self, repos, activity_logger):
        result = await DeleteBeatUseCase(repos.beats, activity_logger).execute(99)

        assert result.code == "BEAT_NOT_FOUND"
        activity_logger.log_delete.assert_not_called()
