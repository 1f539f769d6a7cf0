import os

APPNAME = "appswitch"

# Paths
CACHE_DIR = os.path.expanduser("~/.cache/appswitch")
STORAGE_PATH = os.path.join(CACHE_DIR, "local_storage.json")

# Storage keys
HOTKEY_STORAGE_KEY = "instant-application-switcher-hotkeys"
RECENT_APPS_STORAGE_KEY = "instant-application-switcher-recent-applications"

SWITCHER_CONFIG = {
    # Running process listing
    "sources": {
        "visible_process_command": ["lsappinfo", "visibleProcessList"],
        "app_list_command": ["lsappinfo", "list"],
        "command_timeout": 2.0,  # seconds
        "app_list_ttl": 2.0,  # seconds the rich listing is reused between lookups
        "max_workers": 8,
    },
    # Installed bundle discovery
    "bundles": {
        "suffix": ".app",
        # Scan order encodes priority: first occurrence of a name wins
        "directories": [
            "/Applications",
            "/Applications/Utilities",
            "/System/Applications",
            "/System/Applications/Utilities",
            "/System/Library/CoreServices/Applications",
            "~/Applications",
        ],
        "scan_timeout": 0.05,  # 50ms
        "cache_ttl": 3 * 60,  # 3 minutes
        "default_icon_dir": "/Applications",
    },
    # Activation
    "launch": {
        "open_command": ["open", "-a"],
        "timeout": 5.0,
    },
    # Search and ranking
    "search": {
        "max_results": 5,
        "min_score": 400,
        "scores": {
            "recent_base": 100,
            "recent_step": 5,
            "running": 200,
            "substring": 400,
            "substring_position": 50,
            "abbreviation": 800,
            "prefix": 1000,
        },
    },
    # Persistence
    "storage": {
        "path": STORAGE_PATH,
        "max_recent_apps": 25,
    },
    # UI text
    "ui": {
        "no_apps_text": "No applications found",
        "loading_text": "Loading applications...",
    },
    "advanced": {
        "debug": False,  # Verbose logging to stderr
    },
}
