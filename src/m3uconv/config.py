import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "WARNING").upper()

# Text encoding used when reading from / writing to byte streams
ENCODING = os.getenv("M3U_ENCODING", "utf-8")
