from dotenv import load_dotenv
import os

# Load from project root
ENV_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), ".env")


def load_project_env(path: str = ENV_PATH) -> bool:
    """Load the project .env into os.environ without overriding existing values."""
    return load_dotenv(path)
