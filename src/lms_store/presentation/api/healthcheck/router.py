from fastapi import APIRouter
from starlette import status

healthcheck_router = APIRouter(tags=["healthcheck"])


@healthcheck_router.get(
    "/healthcheck",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}
