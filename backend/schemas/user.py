from pydantic import BaseModel, Field

from schemas.common import ApiModel

# Schema for user authentication credentials
class UserLogin(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)

# Public user details (never includes the password)
class UserResponse(ApiModel):
    id: int
    username: str

# Schema for a successful login
class LoginResponse(BaseModel):
    user: UserResponse
