from pydantic import BaseModel


class ReviewRequest(BaseModel):
    review: str


class PredictionResponse(BaseModel):
    sentiment: str
    confidence: float


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
    code: int | None = None
