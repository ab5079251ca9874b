from .create_card_use_case import CreateCardUseCase
from .delete_card_use_case import DeleteCardUseCase
from .update_card_use_case import UpdateCardUseCase

__all__ = ["CreateCardUseCase", "DeleteCardUseCase", "UpdateCardUseCase"]
