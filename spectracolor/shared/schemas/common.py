from pydantic import BaseModel, Field

class ErrorResponse(BaseModel):
    """Standard error response schema."""
    detail: str = Field(..., description="Error detail message.")
