import logging

NOISY_LOGGERS = ["httpx", "httpcore", "openai", "botocore", "urllib3", "PIL"]


class HealthCheckFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return "/healthz" not in msg and "/_stcore/health" not in msg


def setup_logging(level: int = logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    for logger_name in ["tornado.access", "streamlit.web.server"]:
        logging.getLogger(logger_name).addFilter(HealthCheckFilter())
    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
