from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Project
    PROJECT_NAME: str = "Family Ledger"
    PROJECT_VERSION: str = "0.1.0"
    DESCRIPTION: str = "Shared family expense balances and settlements"

    # Balances
    # One currency minor unit. Used both to classify balances and to drop
    # transfers made of floating point residue.
    BALANCE_TOLERANCE: float = Field(default=0.01, ge=0, allow_inf_nan=False)

    # Presentation
    CURRENCY: str = "EUR"
    LOCALE: str = "it-IT"

    # Logging
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env"
    )

settings = Settings()
