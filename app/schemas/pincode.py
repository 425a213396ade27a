from pydantic import BaseModel


class PincodeData(BaseModel):
    pincode: str
    city: str
    state: str
    district: str
