'''Calculator bot for discord

Evaluates arithmetic expressions typed into chat

Note:
Expressions may contain spaces and do not need to be wrapped in quotes
'''

import logging
from collections import OrderedDict

import discord
from discord.ext import commands

from .util.equations import EquationError


logger = logging.getLogger(__name__)

default_prefix = '='
delete_emoji = '❌'


def default_config():
    return OrderedDict([
        ('token', None),
        ('prefix', default_prefix),
        ('url', None),
    ])


def load_config(environ):
    '''
    Reads the bot settings from environment variables
    Every setting is named CALCBOT_<NAME>, only the token is required
    '''
    config = default_config()
    for name in config:
        key = 'CALCBOT_' + name.upper()
        if environ.get(key):
            config[name] = environ[key]
    if not config['token']:
        raise KeyError('CALCBOT_TOKEN')
    return config


async def get_prefix(bot: commands.Bot, message: discord.Message):
    return commands.when_mentioned_or(bot.config['prefix'])(bot, message)


intents = discord.Intents.default()
intents.message_content = True

bot = commands.Bot(
    command_prefix=get_prefix,
    description=__doc__,
    intents=intents)
bot.config = default_config()


@bot.event
async def setup_hook():
    '''
    Loads the command cogs
    '''
    prefix = __name__ + '.cogs.'
    for extension in [
        'calculator',
    ]:
        await bot.load_extension(prefix + extension)


@bot.event
async def on_ready():
    '''
    Sets up the bot
    '''
    logger.info('Logged in as %s (%s)', bot.user.name, bot.user.id)
    game = 'Type `@{} help` for command list'.format(bot.user.name)
    if bot.config['url']:
        game = bot.config['url'] + ' | ' + game
    await bot.change_presence(activity=discord.Game(name=game))


def is_my_delete_emoji(reaction):
    return reaction.me and reaction.count > 1 and str(reaction.emoji) == delete_emoji


async def delete_if_marked(channel, message_id: int):
    '''
    Deletes one of the bot's messages once a user has added the delete emoji
    Returns whether the message was deleted
    '''
    try:
        message = await channel.fetch_message(message_id)
        if discord.utils.find(is_my_delete_emoji, message.reactions):
            await message.delete()
            return True
    except discord.NotFound:
        # already deleted by an earlier reaction
        return False
    return False


@bot.event
async def on_raw_reaction_add(payload: discord.RawReactionActionEvent):
    if payload.user_id != bot.user.id and str(payload.emoji) == delete_emoji:
        channel = bot.get_channel(payload.channel_id)
        if channel is None:
            return
        await delete_if_marked(channel, payload.message_id)


def error_message(error: Exception):
    '''
    Gets the message shown to the user for a command error
    Returns None for errors that are not caused by the user
    '''
    if isinstance(error, commands.CommandInvokeError):
        error = error.original

    if isinstance(error, commands.CheckFailure):
        message = 'Error: You do not meet the requirements to use this command'
    elif isinstance(error, commands.CommandNotFound):
        if error.args:
            message = error.args[0]
        else:
            message = 'Error: command not found'
    elif isinstance(error, commands.MissingRequiredArgument):
        message = 'Missing parameter: {}\nSee the help text for valid parameters'.format(error.param.name)
    elif isinstance(error, commands.TooManyArguments):
        message = 'Too many parameters\nSee the help text for valid parameters'
    elif isinstance(error, commands.BadArgument):
        message = '{}\nSee the help text for valid parameters'.format(error)
    elif isinstance(error, EquationError):
        if error.args:
            message = 'Invalid expression: {}'.format(error.args[0])
        else:
            message = 'Invalid expression'
    elif isinstance(error, ValueError):
        if error.args:
            message = 'Invalid parameter: {}'.format(error.args[0])
        else:
            message = 'Invalid parameter'
    else:
        message = None

    return message


@bot.event
async def on_command_error(ctx, error: Exception):
    message = error_message(error)
    if message is None:
        if isinstance(error, commands.CommandInvokeError):
            error = error.original
        logger.warning('Unhandled error in command %s', ctx.command)
        await ctx.send('Error: {}'.format(error))
        raise error

    message += '\n(click {} below to delete this message)'.format(delete_emoji)
    msg = await ctx.send(message)
    await msg.add_reaction(delete_emoji)


# ----#-


def main(environ):
    bot.config = load_config(environ)
    bot.run(bot.config['token'], log_handler=None)
