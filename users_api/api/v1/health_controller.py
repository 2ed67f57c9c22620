# External package imports
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter(tags=["health"])

HEALTH_BANNER = r"""
  ██████╗ ██╗  ██╗
 ██╔═══██╗██║ ██╔╝
 ██║   ██║█████╔╝ 
 ██║   ██║██╔═██╗ 
 ╚██████╔╝██║  ██╗
  ╚═════╝ ╚═╝  ╚═╝
"""


@router.get("/health", response_class=PlainTextResponse)
async def health_check() -> str:
    """Liveness probe; does not touch the database"""
    return HEALTH_BANNER
