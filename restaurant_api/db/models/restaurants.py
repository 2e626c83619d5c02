from sqlmodel import Field

from .base import BaseModelDB


class Restaurant(BaseModelDB, table=True):
    name: str = Field(max_length=100)
    description: str = Field(default="", max_length=1000)
    address: str = Field(default="", max_length=200)
    phone: str = Field(default="", max_length=20)
    user_id: int = Field(index=True, foreign_key="user.id")
