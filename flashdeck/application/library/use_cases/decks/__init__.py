from .create_deck_use_case import CreateDeckUseCase
from .delete_deck_use_case import DeleteDeckUseCase
from .update_deck_use_case import UpdateDeckUseCase

__all__ = ["CreateDeckUseCase", "DeleteDeckUseCase", "UpdateDeckUseCase"]
