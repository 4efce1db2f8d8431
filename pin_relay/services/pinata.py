from dataclasses import dataclass
from typing import Any, Optional, Protocol

import requests
from pydantic import ValidationError

from ..schemas.pinata import PinataMetadata, PinJSONBody, PinResult

PIN_FILE_PATH = "/pinning/pinFileToIPFS"
PIN_JSON_PATH = "/pinning/pinJSONToIPFS"


class PinningError(RuntimeError):
    """The upstream pin call failed; the original exception is chained."""


@dataclass(frozen=True)
class PinataCredentials:
    api_key: str
    secret_key: str

    def __repr__(self) -> str:
        return "PinataCredentials(api_key=***, secret_key=***)"

    def headers(self) -> dict:
        return {
            "pinata_api_key": self.api_key,
            "pinata_secret_api_key": self.secret_key,
        }


class PinningClient(Protocol):
    def pin_file(self, content: bytes, filename: str, content_type: str) -> PinResult:
        ...

    def pin_json(self, document: Any, name: str) -> PinResult:
        ...


class PinataClient:
    def __init__(
        self,
        credentials: PinataCredentials,
        api_url: str = "https://api.pinata.cloud",
        timeout: Optional[float] = None,
    ):
        self.credentials = credentials
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    def pin_file(self, content: bytes, filename: str, content_type: str) -> PinResult:
        # requests builds the multipart body and its Content-Type boundary header
        files = {"file": (filename, content, content_type)}
        return self._post(PIN_FILE_PATH, files=files)

    def pin_json(self, document: Any, name: str) -> PinResult:
        body = PinJSONBody(pinataContent=document, pinataMetadata=PinataMetadata(name=name))
        return self._post(PIN_JSON_PATH, json=body.model_dump())

    def _post(self, path: str, **kwargs) -> PinResult:
        try:
            r = requests.post(
                f"{self.api_url}{path}",
                headers=self.credentials.headers(),
                timeout=self.timeout,
                **kwargs,
            )
            r.raise_for_status()
            return PinResult.model_validate(r.json())
        except (requests.RequestException, ValueError, ValidationError) as e:
            raise PinningError(f"pin_failed: {path}: {e}") from e


def gateway_uri(gateway_url: str, ipfs_hash: str) -> str:
    return f"{gateway_url.rstrip('/')}/{ipfs_hash}"
