"""
Task subsystem.

Components:
- task_models.py: data structures (Note, Task, TaskState, HotkeyConfig)
- persistence.py: JSON files with corruption recovery
- task_store.py: locked in-memory state with write-through saves
- done_log.py: append-only completion log and its archives
"""
