"""Stream wrappers for files served from foreign hosts (CDN, object storage)."""

from typing import Optional
from urllib.parse import urlsplit

from .base import encode_target


class CdnStreamWrapper:
    """Files published under a fixed remote base URL."""

    def __init__(self, base_url: str):
        parsed = urlsplit(base_url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"Remote base URL must be absolute: {base_url!r}")
        self.base_url = base_url.rstrip("/")

    def external_url(self, target: str) -> str:
        return f"{self.base_url}/{encode_target(target)}"

    def __repr__(self):
        return f"CdnStreamWrapper({self.base_url!r})"


class S3StreamWrapper:
    """
    Objects in a public S3 bucket; ``s3://<key>`` maps to the object URL.

    Examples:
        bucket="media", region="us-east-1" → https://media.s3.amazonaws.com/<key>
        bucket="media", region="eu-west-1" → https://media.s3.eu-west-1.amazonaws.com/<key>
        public_base_url="https://files.example.org" → https://files.example.org/<key>
    """

    def __init__(self, bucket: str, region: str = "us-east-1", public_base_url: Optional[str] = None):
        if not bucket:
            raise ValueError("S3 bucket name is required")
        self.bucket = bucket
        self.region = region
        self.public_base_url = public_base_url.rstrip("/") if public_base_url else None

    @property
    def base_url(self) -> str:
        if self.public_base_url:
            return self.public_base_url
        if self.region == "us-east-1":
            return f"https://{self.bucket}.s3.amazonaws.com"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com"

    def external_url(self, target: str) -> str:
        return f"{self.base_url}/{encode_target(target)}"

    def __repr__(self):
        return f"S3StreamWrapper({self.bucket!r}, {self.region!r})"
