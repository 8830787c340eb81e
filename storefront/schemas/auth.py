from pydantic import BaseModel, ConfigDict, EmailStr


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginForm(LoginRequest):
    """Values used to fill the admin login form."""

    model_config = ConfigDict(frozen=True)

    remember: bool = False
