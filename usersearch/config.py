import os

MAX_PAGE_SIZE = 25
DEFAULT_TIMEOUT = 1.0


def search_service_url() -> str:
    url = os.getenv("SEARCH_SERVICE_URL")
    if not url:
        raise RuntimeError("SEARCH_SERVICE_URL must be set")
    return url


def search_access_token() -> str:
    return os.getenv("SEARCH_ACCESS_TOKEN", "")


def search_timeout() -> float:
    raw = os.getenv("SEARCH_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"SEARCH_TIMEOUT must be a number, got {raw!r}")
