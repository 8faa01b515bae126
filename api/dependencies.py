from fastapi import Header, HTTPException, Request

from config import Settings
from settlements import SettlementService


def get_settlement_service(request: Request) -> SettlementService:
    """FastAPI dependency that provides the SettlementService."""
    return request.app.state.settlement_service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_actor_id(x_user_id: str = Header(None)) -> str:
    """The acting user. Authentication happens upstream; it only forwards the id."""
    if not x_user_id:
        raise HTTPException(401, "X-User-Id header required")
    return x_user_id
