import discord
from discord import app_commands
import logging
from grimoire.role_data import RoleStore
from grimoire.role_utils import build_role_embed

# Longest role name a user may type, keeps the echoed reply under Discord's message limit
MAX_ROLE_LENGTH = 100

# Role lookup command
async def handle_role(interaction: discord.Interaction, store: RoleStore, role: str):
    found = store.lookup(role)
    if found is None:
        await interaction.response.send_message(
            f"No role that matches '{role[:MAX_ROLE_LENGTH]}' found. Try again with a different role."
        )
        return

    await interaction.response.send_message(embed=build_role_embed(found))

# Reload command
async def handle_reload_roles(interaction: discord.Interaction, store: RoleStore):
    try:
        count = store.load()
    except (OSError, ValueError) as e:
        logging.exception(f"Failed to reload roles from '{store.file_path}': {str(e)}")
        await interaction.response.send_message(
            f"Could not reload roles: {e}. Still indexing {len(store)} roles.",
            ephemeral=True,
        )
        return

    await interaction.response.send_message(f"Reloaded roles, now indexing {count} roles!")

COMMAND_HANDLERS = {
    "role": handle_role,
    "reload-roles": handle_reload_roles,
}

async def dispatch(name: str, interaction: discord.Interaction, store: RoleStore, **options):
    await COMMAND_HANDLERS[name](interaction, store, **options)

class RoleCommandTree(app_commands.CommandTree):
    """Command tree that drops interactions for commands it doesn't know."""

    async def on_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError):
        # Stale registrations from an earlier sync or another scope end up here
        if isinstance(error, app_commands.CommandNotFound):
            return
        await super().on_error(interaction, error)

#Commands
def register_commands(tree: app_commands.CommandTree, store: RoleStore):

    @tree.command(name="role", description="Get information about the requested role, with possible jinxes.")
    @app_commands.describe(role="The role you want information on.")
    async def role_command(interaction: discord.Interaction, role: app_commands.Range[str, 1, MAX_ROLE_LENGTH]):
        await dispatch("role", interaction, store, role=role)

    @tree.command(name="reload-roles", description="Reload role information.")
    async def reload_roles_command(interaction: discord.Interaction):
        await dispatch("reload-roles", interaction, store)
