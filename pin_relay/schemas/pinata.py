from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

class PinataMetadata(BaseModel):
    name: str

class PinJSONBody(BaseModel):
    """Envelope for POST /pinning/pinJSONToIPFS. Only pinataContent is pinned."""
    pinataContent: Any
    pinataMetadata: PinataMetadata

class PinResult(BaseModel):
    """What Pinata returns for a successful pin."""
    model_config = ConfigDict(extra="ignore")

    IpfsHash: str = Field(..., min_length=1)
    PinSize: Optional[int] = None
    Timestamp: Optional[str] = None
