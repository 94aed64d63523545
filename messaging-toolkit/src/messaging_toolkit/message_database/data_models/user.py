"""
User data model.

A user is a named chat participant with an online flag. There is no user
repository: users only exist embedded by value inside 'Message' records.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class User(BaseModel):
    """A chat participant, identified only by first name (not unique)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str
    is_online: bool = False
