"""Pydantic models for Linear webhook payloads."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from app.types.linear import LinearAction, LinearActorType


class LinearModel(BaseModel):
    """Base for Linear payload models: immutable, unknown fields ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class LinearActor(LinearModel):
    """Identity that triggered the event."""

    id: str
    type: LinearActorType = "user"
    name: str
    email: str | None = None
    url: str | None = None


class LinearPerson(LinearModel):
    """User reference embedded in entity payloads (assignee, creator, lead)."""

    name: str
    email: str | None = None


class LinearWorkflowState(LinearModel):
    name: str
    type: str | None = None
    color: str | None = None


class LinearTeam(LinearModel):
    name: str
    key: str | None = None


class LinearIssueParent(LinearModel):
    title: str
    identifier: str | None = None


class LinearLabel(LinearModel):
    name: str
    color: str | None = None


class LinearProjectRef(LinearModel):
    name: str


class LinearCycleRef(LinearModel):
    name: str | None = None
    number: int | None = None


class IssueData(LinearModel):
    """Issue entity payload."""

    title: str
    description: str | None = None
    priority: int | None = None  # 0 = none, 1 = urgent ... 4 = low
    estimate: float | None = None
    dueDate: str | None = None  # YYYY-MM-DD
    number: int | None = None
    url: str
    identifier: str | None = None
    state: LinearWorkflowState | None = None
    team: LinearTeam | None = None
    assignee: LinearPerson | None = None
    creator: LinearPerson | None = None
    parent: LinearIssueParent | None = None
    labels: list[LinearLabel] | None = None
    project: LinearProjectRef | None = None
    cycle: LinearCycleRef | None = None


class CommentData(LinearModel):
    """Comment entity payload."""

    body: str
    edited: bool = False
    issueId: str | None = None
    user: LinearPerson | None = None


class ProjectData(LinearModel):
    """Project entity payload."""

    name: str
    description: str | None = None
    state: str | None = None  # free text, e.g. "started"
    priority: int | None = None
    lead: LinearPerson | None = None
    teams: list[LinearTeam] = []


# Entity type -> typed payload model. Types not listed here have no typed
# payload and are rendered generically.
ENTITY_MODELS: dict[str, type[LinearModel]] = {
    "Issue": IssueData,
    "Comment": CommentData,
    "Project": ProjectData,
}


class LinearWebhookEvent(LinearModel):
    """
    Linear data-change webhook envelope.

    The shape of `data` is determined by `type` alone; use `entity()` to
    get the typed payload.
    """

    action: LinearAction
    type: str  # entity type, e.g. "Issue", "Comment", "IssueLabel"
    actor: LinearActor
    createdAt: str | None = None
    data: dict[str, Any] = {}
    url: str | None = None
    updatedFrom: dict[str, Any] | None = None
    webhookTimestamp: int
    webhookId: str | None = None
    organizationId: str | None = None

    def entity(self) -> LinearModel | None:
        """
        Validate `data` against the model registered for this entity type.

        Returns:
            Typed payload, or None for entity types without a typed payload

        Raises:
            pydantic.ValidationError: If `data` doesn't match the entity model
        """
        model = ENTITY_MODELS.get(self.type)
        if model is None:
            return None
        return model.model_validate(self.data)

    def previous_state_name(self) -> str | None:
        """Workflow state name before an update, if Linear reported one."""
        if not self.updatedFrom:
            return None
        previous = self.updatedFrom.get("state")
        if isinstance(previous, dict):
            name = previous.get("name")
            return name if isinstance(name, str) and name else None
        return None


class WebhookAcceptedResponse(BaseModel):
    """Response body for accepted webhooks."""

    success: Literal[True] = True
