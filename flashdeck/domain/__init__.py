"""
Framework-free core: deck and card entities with their validation rules,
the caller's auth context, change events and the study session state machine.
"""
