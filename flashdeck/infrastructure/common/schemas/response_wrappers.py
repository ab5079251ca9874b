"""Response bodies shared across routers."""

from pydantic import BaseModel, Field


class DeletedResponse(BaseModel):
    """Acknowledges a delete; ``id`` is the removed deck or card."""

    success: bool = True
    id: int = Field(..., description="ID of the deleted resource")
    message: str
