"""Server configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings

# Fixed read deadline, applied as uvicorn's keep-alive timeout.
READ_TIMEOUT_SECONDS = 5


class ServerConfig(BaseSettings):
    """HTTP server configuration.

    Attributes:
        host: The address the server binds to.
        port: The port the server listens on.
        app_name: The title reported by the OpenAPI schema.
    """

    host: str = Field(default="0.0.0.0", description="Server host", min_length=1)
    port: int = Field(default=8080, description="Server port", ge=1, le=65535)
    app_name: str = Field(
        default="Rollout Target Service",
        description="Application name",
        min_length=1,
        max_length=100,
    )

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
        env_ignore_empty = True
