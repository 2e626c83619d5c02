from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from restaurant_api.features.schemas import PartialUpdateIn


# ---------- IN / UPDATE ----------

class RestaurantCreateIn(BaseModel):
    name: str = Field(..., min_length=2, max_length=100, examples=["Chez Paulette"])
    description: str = Field("", max_length=1000)
    address: str = Field(..., min_length=1, max_length=200, examples=["12 rue des Lilas, Lyon"])
    phone: str = Field("", max_length=20, examples=["+33 4 78 00 00 00"])


class RestaurantUpdateIn(PartialUpdateIn):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    address: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, max_length=20)


# ---------- OUT ----------

class RestaurantOut(BaseModel):
    id: int
    name: str
    description: str
    address: str
    phone: str
    user_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
