import logging


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # SQL echo stays off unless asked for explicitly
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
