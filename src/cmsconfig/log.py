import copy
import logging.config

from .utils import canonicalify, ensure_path

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s [%(levelname)s] [%(name)s] - %(message)s"
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": logging.INFO,
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": logging.DEBUG,
            "formatter": "default",
            "filename": "data/cmsconfig.log",
            "maxBytes": 5 * 1024 * 1024,  # 5MB
            "backupCount": 10,
        },
    },
    "loggers": {
        "cmsconfig": {
            "handlers": ["console"],
            "level": logging.DEBUG,
            "propagate": True,
        }
    },
}


def setup(logfile=None, verbose=False):
    """Configure the ``cmsconfig`` logger.

    Console logging is always on. Passing ``logfile`` adds a rotating file
    handler at DEBUG level.
    """
    config = copy.deepcopy(LOGGING_CONFIG)

    if verbose:
        config["handlers"]["console"]["level"] = logging.DEBUG

    if logfile:
        p = canonicalify(logfile)
        if len(p.parts) > 1:
            ensure_path(p.parent)
        config["handlers"]["file"]["filename"] = str(p)
        config["loggers"]["cmsconfig"]["handlers"].append("file")
    else:
        del config["handlers"]["file"]

    logging.config.dictConfig(config)
