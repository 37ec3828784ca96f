"""
Environment variable loader for the MCP server.
Handles loading service account credentials from a file or the environment.
"""
import json
import os
from pathlib import Path
from typing import Any

# Load .env file if it exists
from dotenv import load_dotenv

from config import (
    CREDENTIALS_FILE_ENV,
    CREDENTIALS_JSON_ENV,
    REQUIRED_CREDENTIAL_FIELDS,
    UNRESOLVED_PLACEHOLDER,
)
from lib.errors import ConfigurationError


# Find .env file (look in current dir and parent dirs)
def _find_env_file() -> Path | None:
    current = Path(__file__).parent
    for _ in range(3):  # Check up to 3 levels up
        env_path = current / ".env"
        if env_path.exists():
            return env_path
        current = current.parent
    return None


_env_file = _find_env_file()
if _env_file:
    load_dotenv(_env_file)


def validate_credentials(data: Any) -> dict[str, Any]:
    """
    Check required service account fields and unescape the private key.

    Raises:
        ConfigurationError: If data is not an object or a field is missing
    """
    if not isinstance(data, dict):
        raise ConfigurationError("Invalid credentials JSON: expected a JSON object.")

    missing = [f for f in REQUIRED_CREDENTIAL_FIELDS if not data.get(f)]
    if missing:
        raise ConfigurationError(
            "Invalid credentials JSON file. Missing required fields: " + ", ".join(missing)
        )

    # Keys pasted through env files often carry literal "\n"
    return {**data, "private_key": str(data["private_key"]).replace("\\n", "\n")}


def _read_credentials_file(creds_file: str) -> Any:
    if UNRESOLVED_PLACEHOLDER in creds_file:
        raise ConfigurationError(
            "Environment variable interpolation failed. Credentials file path "
            "contains unresolved placeholders. Please check your extension configuration."
        )

    creds_path = Path(creds_file).expanduser().resolve()
    if not creds_path.is_file():
        raise ConfigurationError(f"{CREDENTIALS_FILE_ENV} not found: {creds_file}")

    try:
        with open(creds_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid credentials JSON file: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Could not read credentials file: {e}") from e


def get_google_credentials() -> dict[str, Any]:
    """
    Get Google Service Account credentials.

    Priority:
    1. GOOGLE_CREDENTIALS_JSON_FILE (path to JSON file)
    2. GOOGLE_CREDENTIALS_JSON (JSON string content)

    Returns:
        dict: Validated credentials with an unescaped private key

    Raises:
        ConfigurationError: If no credentials are configured or they are invalid
    """
    # Option 1: File path
    creds_file = os.environ.get(CREDENTIALS_FILE_ENV)
    if creds_file:
        return validate_credentials(_read_credentials_file(creds_file))

    # Option 2: JSON content
    creds_json = os.environ.get(CREDENTIALS_JSON_ENV)
    if creds_json:
        try:
            data = json.loads(creds_json)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid {CREDENTIALS_JSON_ENV}: {e}") from e
        return validate_credentials(data)

    raise ConfigurationError(
        f"Missing {CREDENTIALS_FILE_ENV} environment variable. "
        "Please configure the credentials JSON file path."
    )
