import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./transhub.db")

# Provider
TRANSLATION_PROVIDER = os.getenv("TRANSLATION_PROVIDER", "echo")
TRANSLATION_TIMEOUT_SECONDS = float(os.getenv("TRANSLATION_TIMEOUT_SECONDS", "30"))

# Google Cloud Translation
GOOGLE_PROJECT_ID = os.getenv("GOOGLE_PROJECT_ID", "starry-fiber-312818")
GOOGLE_LOCATION = os.getenv("GOOGLE_LOCATION", "global")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
