"""Project domain entity."""

from pydantic import BaseModel, ConfigDict, field_validator

from devtrack.models.common import is_blank


class Project(BaseModel):
    """A billable engagement with a name, a client and a budget."""

    model_config = ConfigDict(validate_assignment=True)

    id: int = 0
    name: str | None = None
    client: str | None = None
    budget: int = 0

    @field_validator("budget")
    @classmethod
    def _clamp_budget(cls, value: int) -> int:
        return value if value >= 0 else 0

    def is_valid(self) -> bool:
        return not is_blank(self.name) and not is_blank(self.client) and self.budget > 0

    def __str__(self) -> str:
        return f"{self.name} - {self.client}"
