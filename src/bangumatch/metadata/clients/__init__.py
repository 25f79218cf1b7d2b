"""Client implementations for episode catalogs."""

from bangumatch.metadata.clients.bangumi import BangumiClient

__all__ = ["BangumiClient"]
