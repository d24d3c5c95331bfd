from fastapi import APIRouter

from app.ai.config import load_ai_config

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report service status and the active AI provider mode.")
async def health_check():
    cfg = load_ai_config()
    return {
        "status": "healthy",
        "aiProvider": cfg.provider,
        "liveAI": cfg.live_enabled,
    }
