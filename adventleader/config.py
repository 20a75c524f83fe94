"""
Central configuration for adventleader.

All shared constants live here, together with the loader for the
per-deployment JSON config file (board URL, session cookie, bot token, room).
"""

import json
from dataclasses import dataclass
from pathlib import Path

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_CONFIG_PATH = Path("config.json")

# --- Polling ---
POLL_INTERVAL_SECONDS = 300  # Sleep between two poll cycles

# --- HTTP ---
DEFAULT_TIMEOUT_SECONDS = 30.0  # Applies to both the fetch and the post
DEFAULT_USER_AGENT = "adventleader/1.0"
SESSION_COOKIE_NAME = "session"
MESSAGE_API_URL = "https://api.ciscospark.com/v1/messages"

# --- Rendering ---
STYLE_DETAILED = "detailed"
STYLE_COMPACT = "compact"
ALLOWED_STYLES = frozenset({STYLE_DETAILED, STYLE_COMPACT})

# --- Time Format ---
# Fixed-offset layout used by the leaderboard API, e.g. 2018-12-01T06:12:44+0100
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
NULL_TIMESTAMP = "null"

REQUIRED_KEYS = ("url", "cookie", "bot_token", "room_id")
BOOL_DEFAULTS = {"debug": False, "exit_on_fetch_error": True}


class ConfigLoadError(Exception):
    """Raised when the config file is missing, unreadable or incomplete"""
    pass


@dataclass(frozen=True)
class Config:
    url: str
    cookie: str
    bot_token: str
    room_id: str
    debug: bool = False
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    style: str = STYLE_DETAILED
    exit_on_fetch_error: bool = True
    user_agent: str = DEFAULT_USER_AGENT


def _normalize_key(key: str) -> str:
    """Map `BotToken`, `bot_token` and `botToken` onto the same field name."""
    return key.replace("_", "").lower()


_FIELDS_BY_KEY = {
    _normalize_key(name): name
    for name in Config.__dataclass_fields__
}


def config_from_dict(raw: dict) -> Config:
    """
    Build a Config from a decoded JSON object.

    Keys are matched case-insensitively and ignoring underscores, so both the
    `URL`/`BotToken`/`RoomID` spelling and snake_case are accepted. Unknown
    keys are ignored.

    Raises:
        ConfigLoadError: If a required key is missing or a value is invalid
    """
    if not isinstance(raw, dict):
        raise ConfigLoadError(f"Config must be a JSON object, got {type(raw).__name__}")

    values = {}
    for key, value in raw.items():
        field = _FIELDS_BY_KEY.get(_normalize_key(str(key)))
        if field is not None:
            values[field] = value

    missing = [key for key in REQUIRED_KEYS if not values.get(key)]
    if missing:
        raise ConfigLoadError(f"Missing required config keys: {', '.join(missing)}")

    for key in REQUIRED_KEYS:
        if not isinstance(values[key], str):
            raise ConfigLoadError(f"Config key '{key}' must be a string")

    for key, default in BOOL_DEFAULTS.items():
        values.setdefault(key, default)
        if not isinstance(values[key], bool):
            raise ConfigLoadError(f"Config key '{key}' must be true or false, got {values[key]!r}")

    style = values.get("style", STYLE_DETAILED)
    if style not in ALLOWED_STYLES:
        raise ConfigLoadError(
            f"Invalid style: '{style}'. "
            f"Allowed values: {', '.join(sorted(ALLOWED_STYLES))}"
        )

    try:
        timeout = float(values.get("timeout", DEFAULT_TIMEOUT_SECONDS))
    except (TypeError, ValueError):
        raise ConfigLoadError(f"Config key 'timeout' must be a number, got {values['timeout']!r}")
    if timeout <= 0:
        raise ConfigLoadError("Config key 'timeout' must be positive")

    return Config(
        url=values["url"],
        cookie=values["cookie"],
        bot_token=values["bot_token"],
        room_id=values["room_id"],
        debug=values["debug"],
        timeout=timeout,
        style=style,
        exit_on_fetch_error=values["exit_on_fetch_error"],
        user_agent=str(values.get("user_agent") or DEFAULT_USER_AGENT),
    )


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> Config:
    """
    Read and validate the JSON config file.

    Args:
        path: Location of the config file

    Returns:
        Validated Config

    Raises:
        ConfigLoadError: If the file is missing, not valid JSON or incomplete
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Could not read config file {path}: {e}")

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"Config file {path} is not valid JSON: {e}")

    return config_from_dict(raw)
