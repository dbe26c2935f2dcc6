"""gridmodel configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gridmodel.exceptions import ConfigError

if TYPE_CHECKING:
    from gridmodel.layout.iteration import Axis, Corner


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Absolute tolerance for comparing derived floats
    FLOAT_TOLERANCE: float = Field(default=1e-9, gt=0)

    # Traversal used by Grid.iterator() when no strategy is given
    DEFAULT_CORNER: str = "tl"
    DEFAULT_AXIS: str = "horizontal"

    def default_strategy(self) -> tuple[Corner, Axis]:
        """Get the default traversal corner and axis.

        Returns:
            The (corner, axis) pair named by DEFAULT_CORNER and DEFAULT_AXIS.

        Raises:
            ConfigError: If either setting does not name a corner or axis.
        """
        from gridmodel.layout.iteration import Axis, Corner  # noqa: PLC0415

        try:
            corner = Corner(self.DEFAULT_CORNER)
        except ValueError:
            raise ConfigError(
                "Unknown default corner", param="DEFAULT_CORNER", value=self.DEFAULT_CORNER
            ) from None
        try:
            axis = Axis(self.DEFAULT_AXIS)
        except ValueError:
            raise ConfigError(
                "Unknown default axis", param="DEFAULT_AXIS", value=self.DEFAULT_AXIS
            ) from None
        return corner, axis


# Singleton instance for import convenience
settings = Settings()
