"""
Use cases grouped by context: library (decks and cards), learning (AI card
generation) and study. Each takes the caller's AuthContext explicitly and
talks to storage only through the protocols declared next to it.
"""
