# grimoire/role_utils.py

from enum import IntEnum
import discord
from grimoire.role_data import Role

class Category(IntEnum):
    TOWNSFOLK = 3447003
    OUTSIDER = 1752220
    MINION = 15105570
    DEMON = 15548997
    FABLED = 15844367
    TRAVELER = 10181046

def color_for_category(category: str) -> discord.Colour:
    try:
        return discord.Colour(Category[category.upper()].value)
    except KeyError:
        return discord.Colour.default()

def build_role_embed(role: Role) -> discord.Embed:
    """
    Builds the rich embed shown for a role.
    Unknown categories fall back to the default (unset) colour.
    """
    embed = discord.Embed(
        type="rich",
        title=role.name,
        color=color_for_category(role.type),
        description=role.description,
    )
    if role.icon:
        embed.set_thumbnail(url=role.icon)
    return embed
