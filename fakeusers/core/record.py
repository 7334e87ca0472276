"""Generated user record."""

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """One fake user. Only the text fields change during error injection."""

    model_config = ConfigDict(populate_by_name=True)

    number: int = Field(ge=1, description="1-based position in the record stream")

    id: str = Field(description="UUID drawn from the seeded generator")

    full_name: str = Field(alias="fullName")

    address: str

    phone: str
