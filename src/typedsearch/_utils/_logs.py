import logging
import sys

logger = logging.getLogger("typedsearch")


def setup_logging(debug: bool = False) -> None:
    """Attach a stderr handler to the package logger.

    Calling it more than once only updates the level.
    """
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if any(getattr(h, "_typedsearch", False) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    handler._typedsearch = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
