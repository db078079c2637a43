"""Local (guest) and remote (cloud) persistence adapters."""

from src.seo_center.persistence.attachments import AttachmentUpload, ObjectStorage
from src.seo_center.persistence.local import LocalPersistence
from src.seo_center.persistence.remote import RemotePersistence

__all__ = [
    "AttachmentUpload",
    "LocalPersistence",
    "ObjectStorage",
    "RemotePersistence",
]
