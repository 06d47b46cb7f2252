from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_PORT = 65535


class PortMapping(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ip: Optional[str] = Field(default=None, alias='IP')
    private_port: Optional[int] = Field(default=None, alias='PrivatePort', strict=True, ge=0, le=MAX_PORT)
    public_port: Optional[int] = Field(default=None, alias='PublicPort', strict=True, ge=0, le=MAX_PORT)
    type: Optional[str] = Field(default=None, alias='Type')


class RawContainer(BaseModel):
    """
    A single entry of the daemon's `/containers/json` response. Keys not listed here are ignored.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias='Id')
    image: str = Field(alias='Image')
    names: List[str] = Field(alias='Names', min_length=1)
    command: str = Field(alias='Command')
    created: int = Field(alias='Created', strict=True)  # Seconds or milliseconds since epoch
    status: str = Field(alias='Status')
    ports: List[PortMapping] = Field(default=[], alias='Ports')


class DisplayRow(BaseModel):
    id: str
    image: str
    name: str
    command: str
    created: str
    status: str
    ports: str
