"""Deep Copy Engine: cloning, configuration, and structural comparison."""

from snapclone.engine.clone import CloneEngine, clone, format_path, get_default_engine
from snapclone.engine.compare import structurally_equal
from snapclone.engine.models import CloneConfig
from snapclone.engine.visited import VisitedMap

__all__ = [
    # Models
    "CloneConfig",
    "VisitedMap",
    # Engine
    "CloneEngine",
    "clone",
    "get_default_engine",
    "format_path",
    # Comparison
    "structurally_equal",
]
