from datetime import datetime, timezone

from healthsync.config import settings


def log_message(msg: str, level: str = "INFO") -> None:
    """Append a timestamped message to the HealthSync log."""
    log_file = settings.log_path
    log_file.parent.mkdir(parents=True, exist_ok=True)

    with open(log_file, "a", encoding="utf-8") as f:
        f.write(f"[{datetime.now(timezone.utc).isoformat()}] [{level}] {msg}\n")


def log_failure(msg: str, level: str = "WARN") -> None:
    """Log a recovered failure; an unwritable log never turns it into a crash."""
    try:
        log_message(msg, level)
    except OSError:
        pass
