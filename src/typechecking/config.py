"""Type checking configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TypeCheckingSettings(BaseSettings):
    """Defaults applied when a registry is created.

    Loads from environment variables automatically:
        TYPECHECKING_DISABLED

    Or pass values directly, e.g. ``Registry(DESCRIPTORS, settings=TypeCheckingSettings(disabled=True))``.
    """

    disabled: bool = Field(
        default=False,
        description="Start with every expect_* call turned into a no-op",
    )

    model_config = SettingsConfigDict(
        env_prefix="TYPECHECKING_",
        extra="ignore",
    )
