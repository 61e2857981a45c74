import discord
import logging

# Import from modules
from grimoire.config import (
    BOT_TOKEN,
    GUILD_ID,
    REMOVE_COMMANDS,
    ROLES_FILE_PATH,
    PORT,
    LOG_DIR,
)
from grimoire.commands import RoleCommandTree, register_commands
from grimoire.keepalive import start_webserver
from grimoire.logging_setup import configure_logging
from grimoire.role_data import RoleStore

# -----------------------------
# Discord client setup
# -----------------------------
class GrimoireBot(discord.Client):
    def __init__(self, store: RoleStore, guild_id=None, remove_commands=False):
        intents = discord.Intents.default()  # Slash commands need no privileged intents
        super().__init__(intents=intents)
        self.store = store
        self.guild = discord.Object(id=guild_id) if guild_id else None
        self.remove_commands = remove_commands
        self.tree = RoleCommandTree(self)  # Command tree for slash commands
        register_commands(self.tree, store)

    async def setup_hook(self):
        logging.info("Adding commands...")
        if self.guild:
            self.tree.copy_global_to(guild=self.guild)
            synced = await self.tree.sync(guild=self.guild)
            logging.info(f"Synced {len(synced)} commands to guild {self.guild.id}")
        else:
            synced = await self.tree.sync()
            logging.info(f"Synced {len(synced)} commands globally")

    async def on_ready(self):
        logging.info(f"Logged in as {self.user} (ID: {self.user.id})")
        logging.info("Press Ctrl+C to exit")

    async def close(self):
        if self.remove_commands and self.is_ready():
            logging.info("Removing commands...")
            self.tree.clear_commands(guild=self.guild)
            await self.tree.sync(guild=self.guild)
        await super().close()

# -----------------------------
# Run bot
# -----------------------------
def main():
    configure_logging(LOG_DIR)

    if BOT_TOKEN is None:
        logging.critical("BOT_TOKEN is not set in the environment variables. Exiting.")
        raise ValueError("BOT_TOKEN is not set in the environment variables.")

    store = RoleStore(ROLES_FILE_PATH)
    try:
        store.load()
    except (OSError, ValueError):
        logging.critical(f"Cannot load roles from '{ROLES_FILE_PATH}'. Exiting.")
        raise

    if PORT:
        # Keep-alive server in background thread
        start_webserver(store, PORT)

    client = GrimoireBot(store, guild_id=GUILD_ID, remove_commands=REMOVE_COMMANDS)
    client.run(BOT_TOKEN, log_handler=None)
    logging.info("Gracefully shutting down.")

if __name__ == "__main__":
    main()
