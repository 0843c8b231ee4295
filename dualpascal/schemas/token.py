from pydantic import BaseModel, Field
from typing import Optional


class Token(BaseModel):
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field("bearer", description="Type of the token, typically 'bearer'")
    expires_in: Optional[int] = Field(None, description="Time in seconds until the token expires")
