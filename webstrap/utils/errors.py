import functools
import logging
import sys

from webstrap.utils import console

logger = logging.getLogger("webstrap")


class WebstrapError(Exception):
    """Base for every failure that should end the run with exit code 1."""


class UsageError(WebstrapError):
    pass


class DetectionError(WebstrapError):
    pass


class InstallError(WebstrapError):
    pass


class ServiceError(WebstrapError):
    pass


class InternalError(WebstrapError):
    """A resolved value slipped past validation."""


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except WebstrapError as e:
            console.error(str(e))
            sys.exit(1)
        except Exception as e:
            logger.debug("%s raised", func.__name__, exc_info=True)
            console.error(f"{func.__name__} failed: {e}")
            sys.exit(1)

    return wrapper
