"""Package logger for geodistance"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('geodistance')
LOGGER.setLevel(logging.WARNING)
if not LOGGER.handlers:
    _LOG_HANDLER = logging.StreamHandler()
    _LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
    LOGGER.addHandler(_LOG_HANDLER)

_WARNED = set()


def warn_once(message: str, *args) -> bool:
    """
    Logs a warning the first time a message is seen; repeats are dropped.

    Args:
        message:
            The warning, optionally with %-style placeholders

        *args:
            Values for the placeholders. The formatted text is what
            gets deduplicated.

    Returns:
        bool, whether the warning was logged
    """
    text = message % args if args else message
    if text in _WARNED:
        return False

    LOGGER.warning(text)
    _WARNED.add(text)
    return True
