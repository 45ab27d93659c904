import logging, json, sys, time, os


def _formatter():
    formatter = logging.Formatter(
        fmt=json.dumps({
            "ts": "%(asctime)s",
            "level": "%(levelname)s",
            "name": "%(name)s",
            "msg": "%(message)s"
        }),
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    formatter.converter = time.gmtime  # Use UTC timestamps
    return formatter


def get_logger(name="actor_keys", level=None, to_file=None, to_stdout=None):
    """
    Structured logger for actor_keys modules.

    As a library, nothing is written unless asked for: stdout output is
    enabled with ACTOR_KEYS_LOG_STDOUT=1 (or to_stdout=True) and file output
    with ACTOR_KEYS_LOG_FILE (or to_file). Otherwise records only propagate
    to whatever handlers the application configured.
    """
    logger = logging.getLogger(name)

    if level is None:
        level = os.getenv("ACTOR_KEYS_LOG_LEVEL", "INFO").upper()
    logger.setLevel(level)

    if to_file is None:
        to_file = os.getenv("ACTOR_KEYS_LOG_FILE")
    if to_stdout is None:
        to_stdout = os.getenv("ACTOR_KEYS_LOG_STDOUT", "0") == "1"

    if not logger.handlers:
        if to_stdout:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(_formatter())
            logger.addHandler(handler)

        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(_formatter())
            logger.addHandler(file_handler)

        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

    return logger
