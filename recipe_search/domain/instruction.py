from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Instruction(BaseModel):
    """One step of a recipe, as held by the domain layer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    instruction_id: Optional[int] = Field(default=None, alias="instructionId")
    instruction_number: int = Field(alias="instructionNumber")
    instruction: str
