"""Profile entity."""

from typing import Optional

from pydantic import Field

from study.domain.model.common import DomainModel, UtcDatetime, utcnow
from study.domain.value import UserId, Username


class Profile(DomainModel):
    """Public profile of a user.

    The id is the subject issued by the identity provider; account data
    (email, password, sessions) stays with the provider.
    """

    id: UserId
    username: Username
    avatar_url: Optional[str] = None
    updated_at: UtcDatetime = Field(default_factory=utcnow)
