# app/schemas/user.py
from datetime import datetime
from typing import Any, Mapping

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

CAMEL_CONFIG = {"from_attributes": True, "alias_generator": to_camel, "populate_by_name": True}


class GoogleProfile(BaseModel):
    """The subset of Google's OpenID userinfo a login needs."""

    google_id: str
    email: str
    display_name: str
    first_name: str | None = None
    last_name: str | None = None
    picture: str | None = None

    @classmethod
    def from_userinfo(cls, userinfo: Mapping[str, Any]) -> "GoogleProfile":
        email = userinfo.get("email") or ""
        return cls(
            google_id=userinfo["sub"],
            email=email,
            display_name=userinfo.get("name") or email,
            first_name=userinfo.get("given_name"),
            last_name=userinfo.get("family_name"),
            picture=userinfo.get("picture"),
        )


class UserSummary(BaseModel):
    id: int
    email: str
    display_name: str
    picture: str | None = None

    model_config = CAMEL_CONFIG


class UserRead(UserSummary):
    google_id: str
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime
    last_login: datetime
