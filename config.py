import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("APP_NAME", "CAZ Library")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Startup data
    seed_on_start: bool = os.getenv("SEED_ON_START", "True").lower() in ("true", "1", "yes")

    # CLI output: plain | json | rich
    default_output: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()

    def __post_init__(self):
        if self.debug:
            self.log_level = "DEBUG"

settings = Settings()
