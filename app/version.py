"""Build-time application version constant.

Release tooling rewrites this value when packaging; runtime code reads it
instead of introspecting installed distribution metadata.
"""

from typing import Final

APPLICATION_VERSION: Final[str] = "1.0.0.0"
