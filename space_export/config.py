import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_MANAGEMENT_HOST = "api.contentful.com"
DEFAULT_REQUEST_TIMEOUT = 30

TRUTHY_VALUES = ("1", "true", "yes", "on")


def get_management_token():
    """Retrieves the management API token for the source space."""
    token = os.getenv("SOURCE_MANAGEMENT_TOKEN")
    if not token:
        raise ValueError("Environment variable SOURCE_MANAGEMENT_TOKEN is not set.")
    return token.strip()


def get_source_space_id():
    """Retrieves the ID of the space to export."""
    val = os.getenv("SOURCE_SPACE_ID")
    if not val:
        raise ValueError("Environment variable SOURCE_SPACE_ID is not set.")
    return val.strip()


def get_management_host():
    """Retrieves the management API host, without scheme or trailing slash."""
    host = os.getenv("MANAGEMENT_API_HOST", "").strip() or DEFAULT_MANAGEMENT_HOST
    for scheme in ("https://", "http://"):
        if host.startswith(scheme):
            host = host[len(scheme):]
    return host.rstrip("/")


def get_request_timeout():
    """Retrieves the per-request timeout in seconds."""
    raw = os.getenv("MANAGEMENT_API_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"MANAGEMENT_API_TIMEOUT must be a number, got {raw!r}.") from None
    if timeout <= 0:
        raise ValueError(f"MANAGEMENT_API_TIMEOUT must be positive, got {raw!r}.")
    return timeout


def _env_flag(name):
    return os.getenv(name, "").strip().lower() in TRUTHY_VALUES


def get_skip_flags():
    """
    Reads the SKIP_* switches from the environment.

    Returns:
        dict: skip_content_model, skip_content and skip_webhooks booleans,
        ready to be passed to get_full_source_space().
    """
    return {
        "skip_content_model": _env_flag("SKIP_CONTENT_MODEL"),
        "skip_content": _env_flag("SKIP_CONTENT"),
        "skip_webhooks": _env_flag("SKIP_WEBHOOKS"),
    }
