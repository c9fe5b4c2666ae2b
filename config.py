#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Global constants for hasagi
All arbitrary values are centralized here for easy tracking and modification
"""

# =============================================================================
# APPLICATION METADATA
# =============================================================================

APP_NAME = "hasagi"
APP_VERSION = "1.0.0"
APP_USER_AGENT = f"{APP_NAME}/{APP_VERSION}"  # User-Agent header for HTTP requests
CONSOLE_PREFIX = f"[{APP_NAME}]"              # Prefix of every line printed to stdout


# =============================================================================
# LCU CONNECTION CONSTANTS
# =============================================================================

LCU_HOST = "127.0.0.1"
LCU_USERNAME = "riot"                   # Basic auth user for the LCU
LCU_LOCKFILE_ENV = "LCU_LOCKFILE"       # Environment variable with explicit lockfile path
LCU_CONNECT_RETRY_DELAY_S = 2.0         # Seconds between connection attempts
LCU_PROBE_TIMEOUT_S = 2.0               # Timeout for the readiness probe
LCU_PROBE_PATH = "/riotclient/ux-state" # Any path works, the probe only needs a response
LCU_API_TIMEOUT_S = 10.0                # Timeout for user requests
LCU_PROCESS_NAMES = ("LeagueClientUx", "LeagueClientUx.exe")


# =============================================================================
# WEBSOCKET CONSTANTS
# =============================================================================

WS_PING_INTERVAL_DEFAULT = 20  # Seconds between WebSocket pings
WS_PING_TIMEOUT_DEFAULT = 10   # Seconds before WebSocket ping times out
WS_RECONNECT_DELAY = 1.0       # Seconds to wait before WebSocket reconnect
WS_SUBPROTOCOL = "wamp"
WS_JSON_API_EVENT = "OnJsonApiEvent"
WAMP_SUBSCRIBE = 5
WAMP_EVENT = 8

LISTEN_IDLE_DELAY_S = 0.1      # Queue poll timeout of the listen loop
LCU_EVENT_TYPES = ("Create", "Update", "Delete")


# =============================================================================
# SCHEMA CONSTANTS
# =============================================================================

SCHEMA_HELP_PATH = "/help"
SCHEMA_HELP_METHOD = "POST"      # The LCU serves /help as a remoting function, not a GET resource
SCHEMA_HELP_WORKERS = 16         # Parallel per-function help requests
SCHEMA_HELP_TIMEOUT_S = 30.0     # Timeout for a single help request
SWAGGER_OPENAPI_VERSION = "3.0.0"
SWAGGER_TITLE = "League Client Update API"


# =============================================================================
# OUTPUT FILENAMES
# =============================================================================

OUTPUT_CWD = "./"                             # Target used when an output flag has no value
JSON_INDENT = 4
LISTEN_EVENTS_FILENAME = "lcu-websocket-events.txt"
RAW_CONSOLE_SCHEMA_FILENAME = "console-schema.json"
RAW_FULL_SCHEMA_FILENAME = "full-schema.json"
RAW_EXTENDED_SCHEMA_FILENAME = "extended-schema.json"
SWAGGER_FILENAME = "swagger.json"
TS_TYPES_FILENAME = "lcu-types.d.ts"
TS_ENDPOINTS_FILENAME = "lcu-endpoints.d.ts"
TS_EVENTS_FILENAME = "lcu-events.d.ts"


# =============================================================================
# LOGGING CONSTANTS
# =============================================================================

DEFAULT_VERBOSE = False
LOG_MAX_FILE_SIZE_MB_DEFAULT = 10        # Rotate log file after this many MB
LOG_MAX_AGE_S = 24 * 60 * 60             # Delete logs older than 1 day
LOG_SEPARATOR_WIDTH = 80                 # Width of separator lines in logs (e.g., "=" * 80)
LOG_FILE_PATTERN = "hasagi_*.log"
LOG_TIMESTAMP_FORMAT = "%d-%m-%Y_%H-%M-%S"  # No colons for Windows compatibility


# =============================================================================
# EXIT CODES
# =============================================================================

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130
