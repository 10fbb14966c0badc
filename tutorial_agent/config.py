# Import the standard library module used for environment variables
import os

# Import helper to load environment variables from a .env file
from dotenv import load_dotenv


# Load variables from a .env file into process environment if present
load_dotenv()


# Define a configuration holder class for the Flask application
class Config:
    # Secret key used by Flask (sessions, flashing); falls back to a dev value
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")

    VERSION = os.getenv("VERSION", "v1")
    APP_NAME = os.getenv("APP_NAME", "EditTutor")

    # Comma-separated list of CORS origins; '*' means allow all
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Public oEmbed endpoint used to look up video titles
    OEMBED_ENDPOINT = os.getenv("OEMBED_ENDPOINT", "https://www.youtube.com/oembed")

    # Development toggles controlling Flask/Jinja template auto-reload and debug behavior
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
    TEMPLATES_AUTO_RELOAD = os.getenv("TEMPLATES_AUTO_RELOAD", "true").lower() == "true"

    # Global logging level
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Bind address for the development server (`python -m tutorial_agent`)
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "5077"))
