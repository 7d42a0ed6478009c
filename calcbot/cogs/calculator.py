from discord.ext import commands

from . import util
from ..util import equations


def format_result(value):
    '''
    Formats a result for display, dropping the decimal part of whole numbers
    '''
    if value % 1 == 0 and abs(value) < 1e15:
        return str(int(value))
    return '{:.12g}'.format(value)


class CalculatorCog (util.Cog):
    @commands.group('calc', aliases=['c'], invoke_without_command=True)
    async def group(self, ctx, *, expression: str):
        '''
        Evaluates an arithmetic expression

        Parameters:
        [expression*] the expression to evaluate

        Operations from highest precedence to lowest:

        ^ : exponentiation, grouped right to left (2^3^2 = 2^(3^2))

        * : multiplication
        / : division

        + : addition
        - : subtraction

        Functions:
        sqrt(x) : square root of x

        A - directly before a number makes it negative
        when it starts the expression or follows an operator or (
        '''
        expression = util.strip_quotes(expression)

        result = equations.solve(expression)
        await util.send_embed(
            ctx,
            author=ctx.author,
            description='`{}`\n= {}'.format(expression, format_result(result)))

    @group.command(aliases=['rpn'])
    async def explain(self, ctx, *, expression: str):
        '''
        Shows how an expression is evaluated

        Parameters:
        [expression*] the expression to evaluate
        '''
        expression = util.strip_quotes(expression)

        tokens = equations.tokenize(expression)
        postfix = equations.infix2postfix(tokens)
        result = equations.solve_postfix(postfix)

        output = [
            'Tokens: `{}`'.format(equations.to_string(tokens)),
            'Postfix: `{}`'.format(equations.to_string(postfix)),
            'Result: {}'.format(format_result(result)),
        ]
        await util.send_embed(ctx, author=ctx.author, description='\n'.join(output))


async def setup(bot):
    await bot.add_cog(CalculatorCog(bot))
