from pydantic import BaseModel


class UserCredentials(BaseModel):
    username: str
    password: str


class UserResponse(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    success: bool = True
    user: UserResponse


class UsernameEntry(BaseModel):
    username: str


class UserListResponse(BaseModel):
    users: list[UsernameEntry]
