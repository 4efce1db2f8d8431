from functools import lru_cache
from typing import Optional
from fastapi import Depends
from ..core.config import Settings, get_settings
from ..services.pinata import PinataClient, PinataCredentials, PinningClient

@lru_cache
def _pinata_client(credentials: PinataCredentials, api_url: str, timeout: Optional[float]) -> PinataClient:
    return PinataClient(credentials, api_url=api_url, timeout=timeout)

def get_pinning_client(settings: Settings = Depends(get_settings)) -> Optional[PinningClient]:
    # None means the keys are missing; routes report that per request
    if not settings.pinata_configured:
        return None
    credentials = PinataCredentials(settings.PINATA_API_KEY, settings.PINATA_SECRET_KEY)
    return _pinata_client(credentials, settings.PINATA_API_URL, settings.PINATA_TIMEOUT)
