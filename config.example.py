# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "PLANNER_APP_NAME": "App display name (default: daily-planner).",
    "PLANNER_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths (gitignored)
    "PLANNER_DATA_DIR": "Local data directory (default: .local/planner).",
    "PLANNER_TASKS_PATH": "Tasks text file (default: <data_dir>/tasks.txt).",
    "PLANNER_COMPLETION_LOG_PATH": "Append-only completion log (default: <data_dir>/log.txt).",
    "PLANNER_QUOTES_PATH": "Quotes file, one quote per line (default: quotes.txt).",
    # Task list policy
    "PLANNER_MAX_TASKS": "Maximum number of tasks in the list (default: 100).",
    "PLANNER_MAX_QUOTES": "Maximum number of quote lines read (default: 100).",
    "PLANNER_REMINDER_LEAD_MINUTES": "Minutes before the due time a reminder fires (default: 15).",
    "PLANNER_ATOMIC_SAVE": "Write tasks via temp file + rename (true/false, default: true).",
}
