import os
from dotenv import load_dotenv

load_dotenv()

# Demo app installs HtmxMiddleware only when enabled
FEATURE_HTMX = os.getenv("FEATURE_HTMX", "true").lower() == "true"
# Append "Vary: HX-Request" so caches keep partials apart from full pages
HTMX_VARY_HEADER = os.getenv("HTMX_VARY_HEADER", "true").lower() == "true"
# Log every directive header written by apply() at INFO instead of DEBUG
HTMX_LOG_DIRECTIVES = os.getenv("HTMX_LOG_DIRECTIVES", "false").lower() == "true"


def vary_enabled() -> bool:
    # Re-read per call so the env can be flipped at runtime (tests monkeypatch it)
    return os.getenv("HTMX_VARY_HEADER", "true" if HTMX_VARY_HEADER else "false").lower() == "true"


def log_directives() -> bool:
    return os.getenv("HTMX_LOG_DIRECTIVES", "true" if HTMX_LOG_DIRECTIVES else "false").lower() == "true"
