"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority) + JSON mapping
- task_repository.py: ordered in-memory repository with file save/load
"""
