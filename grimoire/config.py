import os
from dotenv import load_dotenv

load_dotenv(override=True)

# Convert to integers safely
def parse_id(id_str):
    return int(id_str) if id_str and id_str.strip().isdigit() else None

def parse_bool(value, default=False):
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")

# Settings
BOT_TOKEN = os.getenv("BOT_TOKEN")
GUILD_ID = parse_id(os.getenv("GUILD_ID"))  # Test guild, commands register globally when unset
REMOVE_COMMANDS = parse_bool(os.getenv("REMOVE_COMMANDS"))
ROLES_FILE_PATH = os.getenv("ROLES_FILE_PATH", os.path.join("data", "roleData.json"))

# Keep-alive server, disabled unless a port is assigned
PORT = parse_id(os.getenv("PORT"))

LOG_DIR = os.getenv("LOG_DIR", "logs")
