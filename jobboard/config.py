# jobboard/config.py
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

log = logging.getLogger("jobboard.config")

# --- Load env from jobboard/.env OR .env (whichever exists) ---
# Works whether you run from repo root or jobboard/
root = Path(__file__).resolve().parents[1]          # project root
package_env = root / "jobboard" / ".env"
root_env = root / ".env"
if package_env.exists():
    load_dotenv(package_env)
elif root_env.exists():
    load_dotenv(root_env)


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() == "true"


# === ⚙️ Runtime ===
ENV = os.getenv("ENV", "dev").lower()
AUTO_MIGRATE = _flag("AUTO_MIGRATE")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "4000"))

# === 🔐 Secrets ===
_INSECURE_DEV_SECRET = "dev_insecure_change_me"

JWT_SECRET = os.getenv("JWT_SECRET") or os.getenv("SECRET_KEY")
if not JWT_SECRET:
    if ENV not in ("dev", "test"):
        raise ValueError("Missing JWT_SECRET (or SECRET_KEY) in .env")
    log.warning("JWT_SECRET not set; using an insecure development secret")
    JWT_SECRET = _INSECURE_DEV_SECRET

JWT_ALGO = os.getenv("JWT_ALGO", "HS256")
# Tolerate small clock drift (seconds)
JWT_LEEWAY_SEC = int(os.getenv("JWT_LEEWAY_SEC", "0"))

# Registration and login historically issued tokens with different lifetimes
REGISTER_TOKEN_TTL_SECONDS = int(os.getenv("REGISTER_TOKEN_TTL_SECONDS", "300"))
LOGIN_TOKEN_TTL_SECONDS = int(os.getenv("LOGIN_TOKEN_TTL_SECONDS", "3000"))

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# === 🖼️ Listings ===
DEFAULT_LOGO_URL = os.getenv(
    "DEFAULT_LOGO_URL",
    "https://eu.ui-avatars.com/api/?name=John+Doe&size=250",
)

# === 🌍 CORS Settings ===
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000"
    ).split(",")
    if origin.strip()
]

# === 🗄️ Database Configuration ===
def _resolve_sqlite_url(url: str) -> str:
    """Turn 'sqlite:///relative.db' into an absolute path under project root.
    Keep ':memory:' as-is. Ensure absolute paths use 4 slashes."""
    if not url.startswith("sqlite:"):
        return url
    # ':memory:' or bare 'sqlite://'
    if ":memory:" in url or url.rstrip("/") == "sqlite:":
        return url
    prefix = "sqlite:///"
    if url.startswith(prefix):
        path = url[len(prefix):]
        if Path(path).is_absolute():
            return f"sqlite:////{Path(path).as_posix().lstrip('/')}"
        abs_path = (root / path).resolve()
        return f"sqlite:////{abs_path.as_posix().lstrip('/')}"
    return url


def default_database_url() -> str:
    """DATABASE_URL, then the legacy DB_CONNECT name, then ./data/jobboard.db."""
    env_db = os.getenv("DATABASE_URL") or os.getenv("DB_CONNECT")
    if env_db:
        return _resolve_sqlite_url(env_db)
    data_dir = (root / "data").resolve()
    data_dir.mkdir(parents=True, exist_ok=True)
    sqlite_path = (data_dir / "jobboard.db").resolve()
    return f"sqlite:////{sqlite_path.as_posix().lstrip('/')}"


# Optional SQL echo for debugging (SQL_ECHO=true)
SQL_ECHO = _flag("SQL_ECHO")
