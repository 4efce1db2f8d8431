from datetime import datetime
from typing import Literal
from pydantic import BaseModel

class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    timestamp: datetime
