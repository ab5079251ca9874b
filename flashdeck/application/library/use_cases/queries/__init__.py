from .dtos import DashboardSummary, DashboardView, DeckDetail, DeckWithCardCount
from .get_cards_by_deck_use_case import GetCardsByDeckIdUseCase
from .get_dashboard_use_case import GetDashboardUseCase
from .get_deck_detail_use_case import GetDeckDetailUseCase
from .list_decks_use_case import ListDecksUseCase

__all__ = [
    "DashboardSummary",
    "DashboardView",
    "DeckDetail",
    "DeckWithCardCount",
    "GetCardsByDeckIdUseCase",
    "GetDashboardUseCase",
    "GetDeckDetailUseCase",
    "ListDecksUseCase",
]
