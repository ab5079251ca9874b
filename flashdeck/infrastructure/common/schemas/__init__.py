from flashdeck.infrastructure.common.schemas.response_wrappers import DeletedResponse

__all__ = ["DeletedResponse"]
