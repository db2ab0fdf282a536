"""FastAPI application entrypoint for the exception translator."""

from fastapi import FastAPI

from advice.core.errors import register_error_handlers
from advice.schemas.response import ApiResponse

app = FastAPI(title="advice")
register_error_handlers(app)


@app.get("/health")
def health() -> dict:
    """Health check endpoint wrapped in the success envelope."""
    return ApiResponse.success({"status": "ok"}).to_content()
