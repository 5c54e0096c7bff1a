"""
Configuració de la llibreria MySSM BRN
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuració de la llibreria"""

    # Calendari (l'any de registre es valida en hora de Malàisia)
    timezone: str = "Asia/Kuala_Lumpur"
    min_registration_year: int = 1950

    # Logging
    log_level: str = "INFO"
    log_json: bool = True
    redact_logs: bool = True

    class Config:
        env_file = ".env"
        env_prefix = "MYSSM_"
        case_sensitive = False


# Singleton de configuració
settings = Settings()
