"""
Test suite for TemplateService.

Runs against the in-memory SQLite database.

System role: Verification of template administration use cases
"""

import pytest

from studio.application.services.template_cache import TemplateCache
from studio.application.services.template_service import TemplateService
from studio.core.exceptions import TemplateMissingError, ValidationError
from studio.core.timeline.types import TaskDefinition, TimelineTemplate


@pytest.fixture
def template_cache() -> TemplateCache:
    return TemplateCache(ttl_seconds=300)


@pytest.fixture
def template_service(test_async_db, template_cache) -> TemplateService:
    return TemplateService(db=test_async_db, cache=template_cache)


class TestUpsertTemplate:
    """Test suite for TemplateService.upsert_template()."""

    @pytest.mark.asyncio
    async def test_should_create_then_replace(self, template_service: TemplateService) -> None:
        await template_service.upsert_template(
            "portrait",
            [TaskDefinition(name="Book venue", offset_days=-30, order=1)],
        )
        replaced = await template_service.upsert_template(
            "portrait",
            [
                TaskDefinition(name="Confirm contract", offset_days=-14, order=1),
                TaskDefinition(name="Deliver gallery", offset_days=14, order=2),
            ],
        )

        stored = await template_service.get_template("portrait")
        assert stored == replaced
        assert [task.name for task in stored.tasks] == ["Confirm contract", "Deliver gallery"]
        assert len(await template_service.list_templates()) == 1

    @pytest.mark.asyncio
    async def test_should_invalidate_cached_template(
        self,
        template_service: TemplateService,
        template_cache: TemplateCache,
        portrait_template: TimelineTemplate,
    ) -> None:
        template_cache.put(portrait_template)

        await template_service.upsert_template(
            "portrait",
            [TaskDefinition(name="Only task", offset_days=0, order=1)],
        )

        assert template_cache.get("portrait") is None

    @pytest.mark.asyncio
    async def test_duplicate_order_should_raise_validation_error(
        self,
        template_service: TemplateService,
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await template_service.upsert_template(
                "portrait",
                [
                    TaskDefinition(name="A", offset_days=0, order=1),
                    TaskDefinition(name="B", offset_days=1, order=1),
                ],
            )

        assert exc_info.value.details["field"] == "order"

    @pytest.mark.asyncio
    async def test_blank_name_should_raise_validation_error(
        self,
        template_service: TemplateService,
    ) -> None:
        with pytest.raises(ValidationError):
            await template_service.upsert_template(
                "portrait",
                [TaskDefinition(name="  ", offset_days=0, order=1)],
            )


class TestGetTemplate:
    """Test suite for TemplateService.get_template()."""

    @pytest.mark.asyncio
    async def test_missing_type_should_raise(self, template_service: TemplateService) -> None:
        with pytest.raises(TemplateMissingError):
            await template_service.get_template("wedding")

    @pytest.mark.asyncio
    async def test_list_should_be_sorted_by_type(self, template_service: TemplateService) -> None:
        await template_service.upsert_template("wedding", [])
        await template_service.upsert_template("family", [])

        templates = await template_service.list_templates()

        assert [template.session_type for template in templates] == ["family", "wedding"]
