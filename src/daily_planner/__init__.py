"""daily_planner: a small console planner with reminders and carry-over."""

__version__ = "0.1.0"
