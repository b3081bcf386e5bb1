from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Brewery(BaseModel):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    brewery_type: Optional[str] = None
    street: Optional[str] = None
    address_1: Optional[str] = None
    address_2: Optional[str] = None
    address_3: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    state_province: Optional[str] = None
    county_province: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    # kept as text, the API has served both strings and numbers here
    longitude: Optional[str] = None
    latitude: Optional[str] = None
    phone: Optional[str] = None
    website_url: Optional[str] = None
    updated_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @field_validator("longitude", "latitude", mode="before")
    @classmethod
    def _coords_as_text(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v
