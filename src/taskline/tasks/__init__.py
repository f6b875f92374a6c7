"""
Task subsystem.

Components:
- task_models.py: task records (Todo, Deadline, Event)
- task_list.py: ordered in-memory collection addressed by position
- task_store.py: pipe-delimited text file persistence
"""
