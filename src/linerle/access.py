from __future__ import annotations

import errno
import logging
import os

from .errors import AccessError

logger = logging.getLogger(__name__)


def check_access(path: str) -> None:
    """
    Verify that `path` exists and is both readable and writable.

    Raises:
    - AccessError with the system error description of the first failed check.
    """
    if not os.access(path, os.F_OK):
        raise AccessError(path, os.strerror(errno.ENOENT))
    if not os.access(path, os.R_OK) or not os.access(path, os.W_OK):
        raise AccessError(path, os.strerror(errno.EACCES))
    logger.debug("access ok: %s", path)
