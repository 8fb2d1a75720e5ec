"""
Domain models for upset.

All models are re-exported here for convenient access:

    from upset.core.models import ConfigurationDocument, Receipt, RunReport
"""

from upset.core.models.configuration import (
    ConfigurationBody,
    ConfigurationDocument,
    DownloadEntry,
    PackageEntry,
    RepositoryEntry,
)
from upset.core.models.receipt import BatchReport, Receipt, RunReport, SkippedEntry

__all__ = [
    # receipt.py
    "BatchReport",
    # configuration.py
    "ConfigurationBody",
    "ConfigurationDocument",
    "DownloadEntry",
    "PackageEntry",
    "Receipt",
    "RepositoryEntry",
    "RunReport",
    "SkippedEntry",
]
