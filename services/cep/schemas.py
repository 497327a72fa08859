from pydantic import BaseModel

from models.correios.address import Address


class AddressResponse(BaseModel):
    zipcode: str
    street: str
    neighborhood: str
    city: str
    state: str
    complement: str

    @classmethod
    def from_address(cls, address: Address) -> "AddressResponse":
        return cls(**address.model_dump())


class ErrorResponse(BaseModel):
    detail: str
