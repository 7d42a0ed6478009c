'''
Evaluation of infix arithmetic expressions

Supports numbers, + - * / ^, unary minus, parentheses and sqrt

An expression goes through three stages:
    tokenize      -> list of tokens in infix order
    infix2postfix -> the same tokens in postfix (reverse polish) order
    solve_postfix -> a single float
'''

import math
import operator
import re
import string
from collections import namedtuple

NUMBER = 'NUMBER'
OPERATOR = 'OPERATOR'
PAREN_OPEN = 'PAREN_OPEN'
PAREN_CLOSE = 'PAREN_CLOSE'
FUNCTION = 'FUNCTION'

LEFT, RIGHT = 'left', 'right'


# ----#-   Errors


class EquationError (ValueError):
    '''
    Base class for everything that can go wrong evaluating an expression
    '''
    pass


class EmptyExpression (EquationError):
    def __init__(self):
        super().__init__('Expression cannot be empty.')


class InvalidCharacter (EquationError):
    def __init__(self, char):
        super().__init__("Invalid character found in expression: '{}'".format(char))
        self.char = char


class MalformedNumber (EquationError):
    def __init__(self, text):
        super().__init__("Invalid number: '{}'".format(text))
        self.text = text


class UnknownFunction (EquationError):
    def __init__(self, name):
        super().__init__("Unknown function: '{}'".format(name))
        self.name = name


class StrayNegativeSign (EquationError):
    def __init__(self):
        super().__init__('Invalid expression: stray negative sign.')


class MismatchedParenthesis (EquationError):
    def __init__(self):
        super().__init__('Mismatched parenthesis.')


class MalformedExpression (EquationError):
    def __init__(self):
        super().__init__('Invalid expression format.')


class NegativeSquareRoot (EquationError):
    def __init__(self):
        super().__init__('Square root of negative number is not allowed.')


class DivisionByZero (EquationError):
    def __init__(self):
        super().__init__('Division by zero is not allowed.')


# ----#-   Operations


class Token (namedtuple('Token', ['type', 'text'])):
    '''
    A single element of an expression
    The text of a NUMBER token always parses as a float
    '''
    __slots__ = ()

    @property
    def value(self):
        return float(self.text)

    def __str__(self):
        return self.text


Operation = namedtuple('Operation', ['precedence', 'associativity', 'function'])


def divide(a, b):
    if b == 0.0:
        raise DivisionByZero()
    return a / b


def power(a, b):
    '''
    Exponentiation that follows IEEE 754 instead of raising
    or returning a complex number
    '''
    try:
        return math.pow(a, b)
    except ValueError:
        # zero to a negative power or negative base to a fractional power
        if a == 0:
            return math.copysign(math.inf, a) if b % 2 == 1 else math.inf
        return math.nan
    except OverflowError:
        if a < 0 and b % 2 == 1:
            return -math.inf
        return math.inf


def square_root(a):
    if a < 0:
        raise NegativeSquareRoot()
    return math.sqrt(a)


operations = {
    '+': Operation(1, LEFT, operator.add),
    '-': Operation(1, LEFT, operator.sub),
    '*': Operation(2, LEFT, operator.mul),
    '/': Operation(2, LEFT, divide),
    '^': Operation(3, RIGHT, power),
}

functions = {
    'sqrt': square_root,
}

number_components = set(string.digits + '.')
letters = set(string.ascii_letters)
whitespace = re.compile(r'\s+', re.ASCII)


# ----#-   Stages


def is_negative_sign(previous):
    '''
    A minus is the sign of a number when it starts the expression
    or follows an operator or an opening parenthesis
    '''
    return previous is None or previous.type in (OPERATOR, PAREN_OPEN)


def read_run(expression, index, chars):
    '''
    Reads characters from the index for as long as they are in chars
    Returns the text read and the index after it
    '''
    end = index
    while end < len(expression) and expression[end] in chars:
        end += 1
    return expression[index:end], end


def number_token(text):
    try:
        float(text)
    except ValueError:
        raise MalformedNumber(text) from None
    return Token(NUMBER, text)


def tokenize(expression):
    '''
    Splits an infix expression into a list of tokens
    '''
    expression = whitespace.sub('', expression)
    if not expression:
        raise EmptyExpression()

    tokens = []
    index = 0
    while index < len(expression):
        char = expression[index]
        previous = tokens[-1] if tokens else None

        if char in number_components:
            text, index = read_run(expression, index, number_components)
            tokens.append(number_token(text))
        elif char == '-' and is_negative_sign(previous):
            text, index = read_run(expression, index + 1, number_components)
            if not text:
                raise StrayNegativeSign()
            tokens.append(number_token('-' + text))
        elif char in operations:
            tokens.append(Token(OPERATOR, char))
            index += 1
        elif char == '(':
            tokens.append(Token(PAREN_OPEN, char))
            index += 1
        elif char == ')':
            tokens.append(Token(PAREN_CLOSE, char))
            index += 1
        elif char in letters:
            name, index = read_run(expression, index, letters)
            if name not in functions:
                raise UnknownFunction(name)
            tokens.append(Token(FUNCTION, name))
        else:
            raise InvalidCharacter(char)

    return tokens


def should_pop(stack, operation):
    '''
    Whether the operator on top of the stack is applied before the current one
    '''
    if not stack or stack[-1].type != OPERATOR:
        return False
    top = operations[stack[-1].text]
    if operation.associativity == RIGHT:
        return top.precedence > operation.precedence
    return top.precedence >= operation.precedence


def infix2postfix(tokens):
    '''
    Reorders a list of infix tokens into postfix order
    using the shunting-yard algorithm
    '''
    stack = []
    output = []

    for token in tokens:
        if token.type == NUMBER:
            output.append(token)
        elif token.type in (FUNCTION, PAREN_OPEN):
            stack.append(token)
        elif token.type == PAREN_CLOSE:
            while stack and stack[-1].type != PAREN_OPEN:
                output.append(stack.pop())
            if not stack:
                raise MismatchedParenthesis()
            stack.pop()
            # a function applies to the group that directly follows it
            if stack and stack[-1].type == FUNCTION:
                output.append(stack.pop())
        elif token.type == OPERATOR:
            operation = operations[token.text]
            while should_pop(stack, operation):
                output.append(stack.pop())
            stack.append(token)
        else:
            raise MalformedExpression()

    while stack:
        token = stack.pop()
        if token.type in (PAREN_OPEN, PAREN_CLOSE):
            raise MismatchedParenthesis()
        output.append(token)

    return output


def solve_postfix(tokens):
    '''
    Evaluates a list of postfix tokens with a stack
    '''
    stack = []

    for token in tokens:
        if token.type == NUMBER:
            stack.append(token.value)
        elif token.type == FUNCTION:
            if not stack:
                raise MalformedExpression()
            stack.append(functions[token.text](stack.pop()))
        elif token.type == OPERATOR:
            if len(stack) < 2:
                raise MalformedExpression()
            b, a = stack.pop(), stack.pop()
            stack.append(operations[token.text].function(a, b))
        else:
            raise MalformedExpression()

    if len(stack) != 1:
        raise MalformedExpression()

    return stack[0]


def solve(expression):
    '''
    Evaluates an infix expression

    Runs tokenize, infix2postfix and solve_postfix in order
    Raises an EquationError subclass describing the first problem found
    '''
    tokens = tokenize(expression)
    postfix = infix2postfix(tokens)
    return solve_postfix(postfix)


def to_string(tokens):
    return ' '.join(map(str, tokens))


reorder = infix2postfix
evaluate_postfix = solve_postfix
calculate = solve


if __name__ == '__main__':
    print(solve(input('Eq: ')))
