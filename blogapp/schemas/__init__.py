from blogapp.schemas.post import ErrorResponse, HealthResponse, PostCreate, PostResponse

__all__ = ["ErrorResponse", "HealthResponse", "PostCreate", "PostResponse"]
