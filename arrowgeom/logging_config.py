"""Console logging for the arrowgeom service."""
import logging
import sys


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a single stdout handler to the 'arrowgeom' logger and return it."""
    logger = logging.getLogger("arrowgeom")
    logger.setLevel(level)

    # app reloads would otherwise stack handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S')
    )
    logger.addHandler(handler)
    return logger
