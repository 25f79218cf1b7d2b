"""Episode catalog access for bangumatch.

- EpisodeCatalog: the two lookups the matcher depends on.
- BangumiClient: the Bangumi v0 API implementation.
- Settings: endpoint and credential configuration.
"""

from bangumatch.metadata.base import EpisodeCatalog
from bangumatch.metadata.clients.bangumi import BangumiClient
from bangumatch.metadata.settings import Settings

__all__ = ["BangumiClient", "EpisodeCatalog", "Settings"]
