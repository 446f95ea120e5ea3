from pydantic import BaseModel, EmailStr, Field, field_validator
from uuid import UUID


class RegisterRequest(BaseModel):
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=200)
    pass_hash: str = Field(..., min_length=1)

    @field_validator("name")
    def strip_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    pass_hash: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    """Identity handed back to the client after register/login"""

    uuid: UUID
    name: str
