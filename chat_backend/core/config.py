# chat_backend/core/config.py
import os
from typing import Literal
from dotenv import load_dotenv

class Settings:
    """
    Setup environment variables.
        - ROOM_STORE the room store to use: "mongo" or "memory"
        - MONGO_URI / MONGO_DB_NAME / ROOMS_COLLECTION where rooms are kept
        - CORS_ORIGIN the single origin allowed to call the API
        - DEFAULT_PAGE_SIZE messages per page when the caller omits size
        - LOG_LEVEL root logger level name
    """

    # Load environment variables from the .env file
    load_dotenv()

    ROOM_STORE: Literal["mongo", "memory"] = os.getenv("ROOM_STORE", "mongo")

    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "chat")
    ROOMS_COLLECTION: str = os.getenv("ROOMS_COLLECTION", "rooms")

    CORS_ORIGIN: str = os.getenv("CORS_ORIGIN", "http://localhost:3000")

    DEFAULT_PAGE_SIZE: int = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
