from .start_study_use_case import StartStudyUseCase, StudyMaterial

__all__ = ["StartStudyUseCase", "StudyMaterial"]
