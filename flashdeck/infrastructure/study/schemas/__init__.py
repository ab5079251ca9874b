from .study_schemas import StudyCardItem, StudySessionResponse

__all__ = ["StudyCardItem", "StudySessionResponse"]
