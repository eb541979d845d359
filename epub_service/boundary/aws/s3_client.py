"""
S3 client for EPUB bucket operations.

Handles existence probes, whole-object reads and writes, and presigned
download URL generation for artifacts and status records.

Dependencies: boto3
System role: Object store access for the status orchestrator
"""

import boto3
from botocore.exceptions import ClientError

NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


def is_not_found(error: ClientError) -> bool:
    """Return True if a ClientError represents a missing object."""
    return error.response.get("Error", {}).get("Code") in NOT_FOUND_CODES


class S3EpubClient:
    """S3 client for the EPUB bucket (artifacts and status records)."""

    def __init__(self, bucket: str, region: str = "ap-northeast-1", s3_client=None) -> None:
        """
        Initialize S3 client for the EPUB bucket.

        Args:
            bucket: S3 bucket name
            region: AWS region for S3 bucket
            s3_client: Optional preconfigured boto3 S3 client
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = s3_client or boto3.client("s3", region_name=region)

    @property
    def bucket(self) -> str:
        return self._bucket

    def file_exists(self, s3_key: str) -> bool:
        """
        Check if an object exists without reading its content.

        Args:
            s3_key: S3 object key to check

        Returns:
            bool: True if object exists, False otherwise

        Raises:
            ClientError: For any failure other than not-found
        """
        try:
            self._s3_client.head_object(Bucket=self._bucket, Key=s3_key)
            return True
        except ClientError as e:
            if is_not_found(e):
                return False
            raise

    def get_object_bytes(self, s3_key: str) -> bytes | None:
        """
        Read a whole object.

        Args:
            s3_key: S3 object key

        Returns:
            bytes | None: Object body, or None if the object does not exist

        Raises:
            ClientError: For any failure other than not-found
        """
        try:
            response = self._s3_client.get_object(Bucket=self._bucket, Key=s3_key)
        except ClientError as e:
            if is_not_found(e):
                return None
            raise
        body = response["Body"]
        try:
            return body.read()
        finally:
            body.close()

    def put_object_bytes(
        self,
        s3_key: str,
        body: bytes,
        content_type: str = "application/octet-stream",
    ) -> None:
        """
        Overwrite an object with the given body.

        Args:
            s3_key: S3 object key
            body: Full object content
            content_type: MIME type stored with the object

        Raises:
            ClientError: If the upload fails
        """
        self._s3_client.put_object(
            Bucket=self._bucket,
            Key=s3_key,
            Body=body,
            ContentType=content_type,
        )

    def generate_presigned_download_url(
        self,
        s3_key: str,
        expires_in: int = 3600,
    ) -> str:
        """
        Generate presigned URL for downloading an S3 object.

        Args:
            s3_key: S3 object key (path in bucket)
            expires_in: URL expiry in seconds (default 1 hour)

        Returns:
            str: Presigned GET URL valid for expires_in seconds

        Raises:
            ClientError: If presigned URL generation fails
        """
        return self._s3_client.generate_presigned_url(
            ClientMethod="get_object",
            Params={
                "Bucket": self._bucket,
                "Key": s3_key,
            },
            ExpiresIn=expires_in,
        )
