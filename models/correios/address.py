from pydantic import BaseModel, ConfigDict, Field


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    zipcode: str = Field(pattern=r"^[0-9]{8}$")
    street: str
    neighborhood: str
    city: str = Field(min_length=1)
    state: str = Field(pattern=r"^[A-Z]{2}$")
    complement: str
