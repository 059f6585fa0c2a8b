from pydantic_settings import BaseSettings
from typing import List
import os

class SearchSettings(BaseSettings):
    DEFAULT_FIELDS: List[str] = ["name", "nameKana", "affiliation", "affiliationKana"]
    PHONETIC_FIELDS: List[str] = ["nameKana", "affiliationKana"]
    NORMALIZE: bool = True

    # Fields callers may request explicitly (free-form list fields included)
    SEARCHABLE_FIELDS: List[str] = [
        "name", "nameKana", "affiliation", "affiliationKana",
        "attributes", "items", "novelties", "memo", "staffName",
    ]

class ServerSettings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

class AppSettings(BaseSettings):
    SEARCH: SearchSettings = SearchSettings()
    SERVER: ServerSettings = ServerSettings()

    ROSTER_FILE_PATH: str = os.getenv("ROSTER_FILE_PATH", "/app/data/attendees.json")

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = AppSettings()
