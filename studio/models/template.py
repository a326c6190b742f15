"""
Timeline template schemas.

Request/response schemas for template administration.

Dependencies: pydantic
System role: Template API contracts
"""

from pydantic import BaseModel, Field, field_validator

from studio.core.timeline.types import TaskDefinition, TimelineTemplate


class TaskDefinitionSchema(BaseModel):
    """One task of a timeline template."""

    name: str = Field(min_length=1, max_length=255)
    offset_days: int = Field(description="Days relative to the session date (negative = before)")
    order: int = Field(description="Presentation order, unique within the template")
    can_be_automated: bool = False
    approval_required: bool = False
    estimated_hours: float | None = Field(default=None, ge=0)
    requires_photographer: bool = False
    can_be_batched: bool = False

    @classmethod
    def from_domain(cls, task: TaskDefinition) -> "TaskDefinitionSchema":
        return cls(**task.to_dict())

    def to_domain(self) -> TaskDefinition:
        return TaskDefinition(**self.model_dump())


class UpsertTemplateRequest(BaseModel):
    """Request schema for creating or replacing a template."""

    tasks: list[TaskDefinitionSchema] = Field(default_factory=list)

    @field_validator("tasks")
    @classmethod
    def orders_must_be_unique(cls, tasks: list[TaskDefinitionSchema]) -> list[TaskDefinitionSchema]:
        orders = [task.order for task in tasks]
        if len(orders) != len(set(orders)):
            raise ValueError("task order values must be unique")
        return tasks


class TemplateResponse(BaseModel):
    """Response schema for a timeline template."""

    session_type: str
    tasks: list[TaskDefinitionSchema]

    @classmethod
    def from_template(cls, template: TimelineTemplate) -> "TemplateResponse":
        return cls(
            session_type=template.session_type,
            tasks=[TaskDefinitionSchema.from_domain(task) for task in template.tasks],
        )
