"""
PaletteEngine Configuration
Manages environment variables and defaults for the palette service.
"""
import os


class Config:
    """Configuration class for PaletteEngine services."""

    # Palette limits
    MAX_PALETTE_SIZE: int = int(os.environ.get("PALETTE_MAX_SIZE", "256"))
    DEFAULT_AMOUNT: int = int(os.environ.get("PALETTE_DEFAULT_AMOUNT", "16"))

    # Logging
    LOG_LEVEL: str = os.environ.get("PALETTE_LOG_LEVEL", "INFO")

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("PALETTE_METRICS_ENABLED", "1")))

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get("PALETTE_ALLOWED_ORIGINS", "")

    # Service identity
    SERVICE_NAME: str = "palette-engine"
    SERVICE_VERSION: str = "1.0.0"

    @classmethod
    def validate_amount(cls, amount: int) -> bool:
        """Validate a requested palette size."""
        return 0 <= amount <= cls.MAX_PALETTE_SIZE

    @classmethod
    def allowed_origins(cls) -> list:
        """Parse the comma-separated CORS origin list."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]


# Global config instance
config = Config()
