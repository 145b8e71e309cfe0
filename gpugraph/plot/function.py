#-*- coding: utf-8 -*-
"""
function expression evaluator

wraps an asteval interpreter around a single expression of one
free variable:

.. code ::

   f = FunctionEvaluator('sin(x) * x')
   f(2.0)
   f.evaluate_many(np.linspace(-1, 1, 11))

the expression is parsed and checked once when the evaluator is
created. Syntax errors and unknown names raise EvaluationError at
that point. Evaluating a sample never raises: a sample which cannot
be computed (log of a negative number, complex results) yields
nan, division by zero yields inf or nan like numpy does.
"""
import ast
import logging
import numbers

import numpy as np
from asteval import Interpreter

from gpugraph.errors import EvaluationError

logger = logging.getLogger(__name__)

__all__ = ['FunctionEvaluator', 'SYMBOLS']

SYMBOLS = {
    'pi': np.pi,
    'e': np.e,
    'sin': np.sin,
    'cos': np.cos,
    'tan': np.tan,
    'asin': np.arcsin,
    'acos': np.arccos,
    'atan': np.arctan,
    'sinh': np.sinh,
    'cosh': np.cosh,
    'tanh': np.tanh,
    'exp': np.exp,
    'log': np.log,
    'log10': np.log10,
    'log2': np.log2,
    'sqrt': np.sqrt,
    'abs': np.abs,
    'floor': np.floor,
    'ceil': np.ceil,
}


class FunctionEvaluator():
    """
    callable float -> float compiled from an expression string.
    """
    def __init__(self, expression, variable='x', symbols=SYMBOLS):
        """
        :param expression: e.g. "x**2 - 3*x"
        :param variable: name of the free variable
        :param symbols: constants and functions available to the expression
        """
        if not isinstance(expression, str) or not expression.strip():
            raise EvaluationError(expression, 'empty expression')

        self._expression = expression.strip()
        self._variable = variable
        self._symbols = dict(symbols)

        self._interpreter = Interpreter(usersyms=self._symbols)
        self._tree = self._parse(self._expression)
        self._check_names(self._tree)

        logger.debug('compiled expression "%s"', self._expression)

    def _parse(self, expression):
        try:
            tree = ast.parse(expression)
        except SyntaxError as e:
            raise EvaluationError(expression, 'syntax error: {}'.format(e.msg))

        if len(tree.body) != 1 or not isinstance(tree.body[0], ast.Expr):
            raise EvaluationError(expression, 'must be a single expression')

        return tree

    def _check_names(self, tree):
        # only the variable and the given symbols, never the
        # builtins asteval puts into its own symbol table.
        for node in ast.walk(tree):
            if isinstance(node, ast.Name) and node.id != self._variable and node.id not in self._symbols:
                raise EvaluationError(self._expression, 'unknown name "{}"'.format(node.id))

    @property
    def expression(self):
        return self._expression

    @property
    def variable(self):
        return self._variable

    def _run(self, value):
        interpreter = self._interpreter
        interpreter.error = []
        interpreter.symtable[self._variable] = value

        with np.errstate(all='ignore'):
            result = interpreter.run(self._tree, expr=self._expression, with_raise=False)

        return None if interpreter.error else result

    def __call__(self, x):
        value = self._run(np.float64(x))
        if value is None:
            return np.nan

        return _to_float(value)

    def evaluate_many(self, xs):
        """
        evaluates the expression once over the whole array **xs**
        and returns a float64 array of the same length.

        if the expression does not work on arrays (an error or a
        result of the wrong shape) every sample is evaluated on
        its own, so the result is the same as [f(x) for x in xs].
        """
        xs = np.asarray(xs, dtype=np.float64)
        ys = _to_float_array(self._run(xs), xs.shape)
        if ys is not None:
            return ys

        logger.debug('expression "%s" falls back to per sample evaluation', self._expression)
        return np.fromiter((self(x) for x in xs), dtype=np.float64, count=len(xs))

    def __repr__(self):
        return 'FunctionEvaluator("{}")'.format(self._expression)


def _to_float(value):
    if isinstance(value, (complex, np.complexfloating)):
        return float(value.real) if value.imag == 0 else np.nan
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return np.nan


def _to_float_array(value, shape):
    """
    converts the result of an array evaluation, returns None
    if it cannot stand for one value per sample.
    """
    if not isinstance(value, (np.ndarray, np.generic, numbers.Number)):
        return None

    value = np.asarray(value)
    if value.dtype.kind == 'c':
        value = np.where(value.imag == 0, value.real, np.nan)
    elif value.dtype.kind not in 'biuf':
        return None

    if value.shape == ():
        value = np.full(shape, value, dtype=np.float64)
    if value.shape != shape:
        return None

    return value.astype(np.float64)
