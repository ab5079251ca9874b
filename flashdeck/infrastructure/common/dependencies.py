"""Route-level guards shared by the API routers."""

from fastapi import HTTPException, status

from flashdeck import feature_flags


def require_ai_enabled() -> None:
    """
    Reject the request with 410 Gone when no AI provider is configured.

    Usage:
        @router.post("/...", dependencies=[Depends(require_ai_enabled)])
    """
    if not feature_flags.is_ai_enabled():
        raise HTTPException(
            status_code=status.HTTP_410_GONE,
            detail="AI card generation is not available on this server",
        )
