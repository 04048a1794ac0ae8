from pydantic import BaseModel, EmailStr


class UserRegister(BaseModel):
    name: str
    email: EmailStr
    password: str


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    role: str

    class Config:
        from_attributes = True


class MeResponse(BaseModel):
    user: UserResponse


class Token(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str
