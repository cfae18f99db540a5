"""
Framework constants shared by the loader, sync and generators.
"""

FRAMEWORK_NAME = "tnf"

# Config file stem; the source file on disk is ``.tnfrc.ts``
CONFIG_FILE = f".{FRAMEWORK_NAME}rc"
CONFIG_FILE_NAME = f"{CONFIG_FILE}.ts"

# Default client entry, relative to the project root
DEFAULT_CLIENT_ENTRY = "src/client.tsx"
