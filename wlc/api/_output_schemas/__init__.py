"""Output schemas for API commands.

Importing this package registers every domain's output models.
"""

from . import config, links, log  # noqa: F401
