import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", os.urandom(32).hex())
    SESSION_NOTES_PATH = os.environ.get(
        "SESSION_NOTES_PATH", os.path.join(BASE_DIR, "notes")
    )
    SESSION_NOTES_STRICT_LINKS = os.environ.get(
        "SESSION_NOTES_STRICT_LINKS", "false"
    ).lower() in ("1", "true", "yes", "on")
