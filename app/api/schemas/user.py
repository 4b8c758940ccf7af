from pydantic import BaseModel

class DetailsResponse(BaseModel):
    success: bool
    message: str
