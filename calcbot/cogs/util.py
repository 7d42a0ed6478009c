import discord
from discord.ext import commands


class Cog (commands.Cog):
    def __init__(self, bot):
        self.bot = bot


def strip_quotes(arg):
    '''
    Strips quotes from arguments
    '''
    if len(arg) >= 2 and arg.startswith('"') and arg.endswith('"'):
        arg = arg[1:-1]
    return arg


async def send_embed(ctx, *, content=None, author=None, color=None, description=None, fields=[]):
    '''
    Creates and sends an embed
    '''
    embed = discord.Embed()
    if description is not None:
        embed.description = description
    if author is not None:
        embed.color = author.color
        embed.set_author(name=author.display_name, icon_url=author.display_avatar.url)
    if color:
        embed.color = color
    if fields:
        for field in fields:
            embed.add_field(name=field[0], value=field[1], inline=field[2] if len(field) > 2 else False)
    return await ctx.send(content=content, embed=embed)
