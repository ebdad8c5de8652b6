"""projector — directory-scoped key-value configuration store.

Values are attached to filesystem paths and resolved by walking up
from the working directory, so deeper paths override their ancestors.
"""

from projector.version import __version__

__all__: list[str] = ["__version__"]
