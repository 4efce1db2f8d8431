from pydantic import BaseModel, Field

class UploadResponse(BaseModel):
    uri: str = Field(
        ...,
        description="Public gateway URL of the pinned content",
        examples=["https://gateway.pinata.cloud/ipfs/QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG"],
    )
