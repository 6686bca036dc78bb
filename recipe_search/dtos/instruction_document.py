from typing import Literal, Optional

from pydantic import Field

from recipe_search.domain.instruction import Instruction
from recipe_search.dtos.base_document import INSTRUCTION_DOC, BaseDocument


class InstructionDocument(BaseDocument):
    """A DTO for one instruction step nested inside a recipe document."""

    document_class: Literal["InstructionDoc"] = Field(
        default=INSTRUCTION_DOC, alias="_class"
    )

    instructionId: Optional[int] = None
    instructionNumber: int
    instruction: str

    @classmethod
    def create(cls, instruction: Instruction) -> "InstructionDocument":
        return cls(
            instructionId=instruction.instruction_id,
            instructionNumber=instruction.instruction_number,
            instruction=instruction.instruction,
        )
