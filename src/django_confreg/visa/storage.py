"""Uploads to S3-compatible object storage (AWS S3, Cloudflare R2, MinIO)."""

import logging
import time
from dataclasses import dataclass
from typing import IO

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from django.core.files.uploadedfile import UploadedFile

from django_confreg.settings import StorageConfig, get_config

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when an object cannot be written to storage."""


@dataclass(frozen=True, slots=True)
class StoredFile:
    """Where an uploaded file ended up."""

    key: str
    name: str


def build_object_key(file_name: str, prefix: str = "uploads", now: float | None = None) -> str:
    """Return ``<prefix>/<epoch-ms>_<file_name>``."""
    millis = int((time.time() if now is None else now) * 1000)
    return f"{prefix.rstrip('/')}/{millis}_{file_name}"


class ObjectStorage:
    """Thin wrapper around a boto3 S3 client bound to the configured bucket.

    Args:
        config: Storage settings; defaults to ``DJANGO_CONFREG["storage"]``.
    """

    def __init__(self, config: StorageConfig | None = None) -> None:
        self.config = config or get_config().storage
        self.s3 = boto3.client(
            "s3",
            endpoint_url=self.config.endpoint_url or None,
            aws_access_key_id=self.config.access_key_id,
            aws_secret_access_key=self.config.secret_access_key,
            region_name=self.config.region,
        )

    def upload_fileobj(self, file_obj: IO[bytes], file_name: str, content_type: str = "") -> StoredFile:
        """Upload an in-memory or temporary file under a timestamped key.

        Args:
            file_obj: Readable binary file object.
            file_name: Original file name, kept in the key and the result.
            content_type: MIME type stored as the object's ``ContentType``.

        Returns:
            The stored key and original name.

        Raises:
            StorageError: If the bucket is not configured or the upload fails.
        """
        if not self.config.bucket:
            msg = "DJANGO_CONFREG['storage']['bucket'] is not configured"
            raise StorageError(msg)

        key = build_object_key(file_name, self.config.key_prefix)
        extra_args = {"ContentType": content_type} if content_type else {}
        try:
            self.s3.upload_fileobj(file_obj, self.config.bucket, key, ExtraArgs=extra_args)
        except (BotoCoreError, ClientError) as exc:
            logger.exception("Error uploading %s to bucket %s", key, self.config.bucket)
            msg = f"Upload of {file_name!r} failed"
            raise StorageError(msg) from exc

        logger.info("Uploaded %s to bucket %s", key, self.config.bucket)
        return StoredFile(key=key, name=file_name)


def upload_file(uploaded: UploadedFile) -> StoredFile:
    """Store a Django ``UploadedFile`` and return where it went."""
    return ObjectStorage().upload_fileobj(uploaded, uploaded.name, uploaded.content_type or "")
