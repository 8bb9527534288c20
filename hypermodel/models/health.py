from typing import Optional

from pydantic import BaseModel, Field


class Health(BaseModel):
    status: int = Field(..., description="HTTP status code")
    status_message: str = Field(..., description="Human readable status")
    timestamp: str = Field(..., description="ISO 8601 UTC timestamp")
    ip_address: str = Field(..., description="Address of the serving host")
    echo: Optional[str] = Field(None, description="Echoed query parameter")
    path_echo: Optional[str] = Field(None, description="Echoed path parameter")
