from petgallery.configs.logging_init import initialize_loggers, logger
from petgallery.configs.settings_models import Settings

# Settings
# Overwrite priority: environment variables > default values
settings = Settings()

# Initialize all loggers with the verbosity level from settings
initialize_loggers(verbose_level=settings.logging.verbosity_level)

logger.debug(f"Settings: {settings.model_dump(exclude={'api': {'key'}})}")
if not settings.api.key:
    logger.warning("PETGALLERY_API_KEY is not set; the pet API may reject requests")
