import asyncio
import logging
import uuid
from typing import Any, Dict, Optional

import aioboto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.core.exceptions import NotFoundError, UpstreamFailure
from app.infrastructure.storage.base import BlobStore, StoredBlob, RAW_RESOURCE

logger = logging.getLogger(__name__)

MISSING_OBJECT_CODES = {"404", "NoSuchKey", "NotFound", "NoSuchVersion"}


class S3BlobStore(BlobStore):
    """Хранилище файлов в S3 (или совместимом сервисе).

    Ожидается бакет с включенным версионированием: VersionId закрепляет
    конкретную ревизию файла. Для бакета без версий version будет None,
    и адрес указывает на текущую ревизию.
    """

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        key_prefix: str = "pdf-annotator",
        endpoint_url: Optional[str] = None,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        url_expires_seconds: int = 3600,
        timeout_seconds: float = 10.0,
        session: Optional[aioboto3.Session] = None
    ):
        self.bucket = bucket
        self.region = region
        self.key_prefix = key_prefix
        self.endpoint_url = endpoint_url
        self.url_expires_seconds = url_expires_seconds
        self.timeout_seconds = timeout_seconds
        self._session = session or aioboto3.Session(
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
            region_name=region
        )
        self._config = Config(
            connect_timeout=timeout_seconds,
            read_timeout=timeout_seconds,
            retries={"max_attempts": 2}
        )

    async def _call(self, operation: str, **params) -> Any:
        """Один вызов S3 с ограничением по времени"""
        try:
            async with self._session.client(
                "s3",
                region_name=self.region,
                endpoint_url=self.endpoint_url,
                config=self._config
            ) as s3:
                method = getattr(s3, operation)
                return await asyncio.wait_for(method(**params), timeout=self.timeout_seconds)
        except ClientError as e:
            code = str(e.response.get("Error", {}).get("Code", ""))
            if code in MISSING_OBJECT_CODES:
                raise NotFoundError("Stored file not found") from e
            logger.error(f"S3 {operation} failed: {code}")
            raise UpstreamFailure(f"Blob store {operation} failed") from e
        except (BotoCoreError, asyncio.TimeoutError) as e:
            logger.error(f"S3 {operation} failed: {e!r}")
            raise UpstreamFailure(f"Blob store {operation} failed") from e

    def _object_params(self, key: str, version: Optional[str]) -> Dict[str, str]:
        params = {"Bucket": self.bucket, "Key": key}
        if version:
            params["VersionId"] = version
        return params

    async def put(self, content: bytes, content_type: str = "application/pdf") -> StoredBlob:
        key = f"{self.key_prefix}/{uuid.uuid4().hex}.pdf"
        response = await self._call(
            "put_object",
            Bucket=self.bucket,
            Key=key,
            Body=content,
            ContentType=content_type
        )
        version = response.get("VersionId")
        logger.info(f"Stored blob {key} ({len(content)} bytes) in S3, version={version}")
        return StoredBlob(key=key, version=version)

    async def get_url(self, key: str, version: Optional[str], resource_kind: str = RAW_RESOURCE) -> str:
        self.check_resource_kind(resource_kind)
        return await self._call(
            "generate_presigned_url",
            ClientMethod="get_object",
            Params=self._object_params(key, version),
            ExpiresIn=self.url_expires_seconds
        )

    async def delete(self, key: str, version: Optional[str]) -> None:
        try:
            await self._call("delete_object", **self._object_params(key, version))
        except NotFoundError:
            logger.info(f"Blob {key} already absent in S3")
            return
        logger.info(f"Deleted blob {key} from S3, version={version}")

    async def describe(self, key: str, version: Optional[str]) -> Dict[str, Any]:
        response = await self._call("head_object", **self._object_params(key, version))
        return {
            "size": response.get("ContentLength"),
            "content_type": response.get("ContentType"),
            "last_modified": response.get("LastModified"),
            "version": response.get("VersionId", version),
        }
