# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKBOT_APP_NAME": "Name the bot introduces itself with (default: Barney).",
    "TASKBOT_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths
    "TASKBOT_DATA_DIR": "Local data directory (default: .local/taskbot).",
    "TASKBOT_LOG_DIR": "Directory for taskbot.log (default: <data_dir>).",
    "TASKBOT_SAVE_PATH": "Task save file when no path is given on the command line (default: list.txt).",
}
