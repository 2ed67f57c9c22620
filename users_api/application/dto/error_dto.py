from pydantic import BaseModel


class ErrorBody(BaseModel):
    """Machine-readable code plus a caller-safe message"""
    code: str
    message: str


class ErrorResponse(BaseModel):
    """Envelope returned for every error response"""
    error: ErrorBody
