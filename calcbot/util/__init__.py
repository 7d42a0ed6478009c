from .equations import EquationError, solve

__all__ = ['EquationError', 'solve']
