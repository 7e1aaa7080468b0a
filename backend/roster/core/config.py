import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    EMPLOYEE_STORE_PATH: str = "employee_store.json"
    EMPLOYEE_STORAGE_KEY: str = "employee_management_data"
    SEED_INITIAL_DATA: bool = True

    NEW_HIRE_WINDOW_DAYS: int = 30

    FILM_API_BASE_URL: str = "https://swapi.dev/api"
    FILM_API_TIMEOUT_SECONDS: float = 10.0

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
