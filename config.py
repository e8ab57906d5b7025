import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "change-me")
    MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/FamilyCare")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    DEBUG = os.environ.get("DEBUG", "false").lower() in ("1", "true", "yes")
