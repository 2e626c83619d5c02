from pydantic import BaseModel, EmailStr, Field

from restaurant_api.features.users.schemas import UserOut

# ---------- Inputs ----------

class RegisterIn(BaseModel):
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8, max_length=72)

class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


# ---------- Outputs ----------

class LoginOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # secondes (durée de vie de l'access token)
    user: UserOut
