from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from petgallery.models.pets import AnimalType


class PetApiConfig(BaseSettings):
    """Remote pet-image API (TheCatAPI / TheDogAPI) configuration."""

    # Single secret; absence is not validated and surfaces as auth errors upstream
    key: Optional[str] = Field(default=None, description="Static API key sent as x-api-key")
    url_template: str = Field(
        default="https://api.the{animal_type}api.com",
        description="Base URL of the API, formatted with the animal type",
    )
    timeout: float = Field(default=10.0, description="HTTP timeout in seconds")

    model_config = SettingsConfigDict(env_prefix="PETGALLERY_API_")

    def base_url(self, animal_type: AnimalType) -> str:
        return self.url_template.format(animal_type=AnimalType(animal_type).value)


class GalleryConfig(BaseSettings):
    page_size: int = Field(default=20, ge=1, le=100)
    default_animal_type: AnimalType = Field(default=AnimalType.CAT)
    lazy_margin_px: int = Field(default=100, ge=0)
    image_height_px: int = Field(default=200, ge=1)
    supersede_stale: bool = Field(
        default=False,
        description="Drop results of requests superseded by a newer one of the same kind",
    )

    model_config = SettingsConfigDict(env_prefix="PETGALLERY_GALLERY_")


class DashConfig(BaseSettings):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8050)
    debug: bool = Field(default=False)

    model_config = SettingsConfigDict(env_prefix="PETGALLERY_DASH_")


class LoggingConfig(BaseSettings):
    verbosity_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_prefix="PETGALLERY_LOGGING_")


class Settings(BaseSettings):
    api: PetApiConfig = Field(default_factory=PetApiConfig)
    gallery: GalleryConfig = Field(default_factory=GalleryConfig)
    dash: DashConfig = Field(default_factory=DashConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(env_prefix="PETGALLERY_")
