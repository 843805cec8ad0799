"""
Task subsystem.

Components:
- task_models.py: data structures (Task)
- task_store.py: SQLite-backed storage
- memory_store.py: process-local storage with the same contract
"""
