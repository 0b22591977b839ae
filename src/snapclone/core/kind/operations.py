"""Pure functions implementing the unsupported-type policies."""

from __future__ import annotations

import os
import warnings
from typing import Any

from snapclone.core.errors import UnsupportedTypeError, UnsupportedTypeWarning

# Warnings point at the first frame outside the package
_PACKAGE_PREFIX = os.path.dirname(os.path.dirname(os.path.dirname(__file__))) + os.sep


def unsupported_error(value: Any, path: str) -> Any:
    """Reject a value the engine cannot clone.

    Args:
        value: The unsupported value.
        path: Its location in the input.

    Returns:
        Never returns.

    Raises:
        UnsupportedTypeError: Always.
    """
    raise UnsupportedTypeError(value, path)


def unsupported_passthrough(value: Any, path: str) -> Any:
    """Share an unsupported value by reference.

    The clone keeps the original object, so mutations through either side are
    visible in both. A warning is emitted at the caller's clone() call.

    Args:
        value: The unsupported value.
        path: Its location in the input.

    Returns:
        The value itself.
    """
    warnings.warn(
        f"{type(value).__qualname__} at {path} is not cloneable and is shared by reference.",
        UnsupportedTypeWarning,
        skip_file_prefixes=(_PACKAGE_PREFIX,),
    )
    return value
