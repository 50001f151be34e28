"""
Task subsystem.

Components:
- task_models.py: Task record, TaskKind tag, save-record codec
- task_list.py: ordered in-memory list with 1-based indexing
- task_store.py: flat-file load/save
"""
