from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

class RadarRequest(BaseModel):
    """Radar request schema. Points are validated by the engine, not here."""
    protocols: Optional[List[str]] = None
    scan: Optional[List[Any]] = None

class CoordinateOut(BaseModel):
    """Target coordinate, echoed as sent (a null component stays null)."""
    x: Union[int, float, None] = None
    y: Union[int, float, None] = None

class RadarResponse(BaseModel):
    """Response envelope for resolved requests; data is empty unless a target was found."""
    model_config = ConfigDict(populate_by_name=True)

    status_ok: bool = Field(alias="statusOk")
    message: str
    data: Union[CoordinateOut, Dict[str, Any]] = Field(default_factory=dict)

class MessageResponse(BaseModel):
    """Bare message body for requests that could not be parsed."""
    message: str
