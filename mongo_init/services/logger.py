import datetime, json, logging, os, sys
from datetime import timezone
from logging.handlers import TimedRotatingFileHandler
from dotenv import load_dotenv


load_dotenv()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DEFAULT_LOG_DIR = "logs"
LOG_DIR = os.getenv("LOG_DIR", DEFAULT_LOG_DIR)


# ---------- JSON logger to stdout ----------
class JsonFormatter(logging.Formatter):
    def format(self, record):
        ts = datetime.datetime.now(timezone.utc).isoformat()
        base = {
            "timestamp": ts,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
            "process": record.process,
            "thread": record.thread
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            base.update(extra)
        return json.dumps(base, default=str, ensure_ascii=False)


def get_logger(name: str, log_file: str = "mongo_init.log") -> logging.Logger:
    """
    Return the "mongo-init.<name>" logger, writing JSON lines to stdout and to
    a midnight-rotated file under LOG_DIR. Handlers are attached only once.
    """
    logger = logging.getLogger(f"mongo-init.{name}")
    if logger.handlers:
        return logger

    os.makedirs(LOG_DIR, exist_ok=True)

    # --- StreamHandler (stdout) ---
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(JsonFormatter())

    # --- FileHandler (rotates at midnight, keeps 7 days) ---
    file_handler = TimedRotatingFileHandler(
        os.path.join(LOG_DIR, log_file),
        when="midnight",
        interval=1,
        backupCount=7,
        delay=True,
    )
    file_handler.setFormatter(JsonFormatter())

    logger.setLevel(LOG_LEVEL)
    logger.addHandler(stream_handler)
    logger.addHandler(file_handler)
    logger.propagate = False
    return logger
