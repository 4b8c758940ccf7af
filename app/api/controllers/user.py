from app.api.schemas.user import DetailsResponse
from app.log import log


async def get_details() -> DetailsResponse:
    log().info("Fetching user details")
    return DetailsResponse(success=True, message="User details fetched")
