"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_errors.py: exceptions raised by the store
- task_codec.py: plain-text block format used by the tasks file
- task_store.py: in-memory list mirrored to the tasks file
- task_reminders.py: "due in 15 minutes" policy
"""
