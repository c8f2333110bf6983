import math
import sys
from enum import Enum

from ast_nodes import (
    Number, String, Bool, Var, Binary, Unary,
    VarDecl, Assign, Print, DebugPrint, If, While, Break, Continue,
)
from errors import StepLimitError
from lexer import tokenize
from parser import parse
from values import is_truthy, to_number, values_equal, display

# value of a name that was never bound
UNBOUND_VALUE = 0.0


class Signal(Enum):
    NONE = "none"
    BREAK = "break"
    CONTINUE = "continue"


class Interpreter:
    def __init__(self, out=None, err=None, max_steps: int | None = None):
        self.env = {}           # the one global scope
        self.out = out
        self.err = err
        self.max_steps = max_steps  # set to an int to guard against infinite loops
        self.steps = 0

    def _tick(self):
        if self.max_steps is None:
            return
        self.steps += 1
        if self.steps > self.max_steps:
            raise StepLimitError(self.max_steps)

    # ---------- STATEMENTS ----------
    def execute(self, statements):
        for stmt in statements:
            # a stray top-level break ends the program
            if self.execute_statement(stmt) is Signal.BREAK:
                break

    def execute_block(self, statements) -> Signal:
        for stmt in statements:
            signal = self._execute_statement(stmt)
            if signal is not Signal.NONE:
                return signal
        return Signal.NONE

    def execute_statement(self, stmt) -> Signal:
        try:
            return self._execute_statement(stmt)
        except RecursionError:
            print("Runtime error: statement nested too deeply", file=self.err or sys.stderr)
            return Signal.NONE

    def _execute_statement(self, stmt) -> Signal:
        self._tick()

        if isinstance(stmt, (VarDecl, Assign)):
            self.env[stmt.name] = self.evaluate(stmt.value)
            return Signal.NONE

        if isinstance(stmt, Print):
            print(display(self.evaluate(stmt.expr)), file=self.out or sys.stdout)
            return Signal.NONE

        if isinstance(stmt, DebugPrint):
            print(f"[debug] {display(self.evaluate(stmt.expr))}", file=self.err or sys.stderr)
            return Signal.NONE

        if isinstance(stmt, If):
            if is_truthy(self.evaluate(stmt.condition)):
                return self.execute_block(stmt.then_block)
            if stmt.else_block is not None:
                return self.execute_block(stmt.else_block)
            return Signal.NONE

        if isinstance(stmt, While):
            self.run_while(stmt)
            return Signal.NONE

        if isinstance(stmt, Break):
            return Signal.BREAK

        if isinstance(stmt, Continue):
            return Signal.CONTINUE

        raise TypeError(f"Unknown statement node: {type(stmt).__name__}")

    def run_while(self, stmt):
        while True:
            self._tick()
            if not is_truthy(self.evaluate(stmt.condition)):
                return
            # continue just ends this pass; break ends the loop
            if self.execute_block(stmt.body) is Signal.BREAK:
                return

    # ---------- EXPRESSIONS ----------
    def evaluate(self, expr):
        if isinstance(expr, Number):
            return float(expr.value)
        if isinstance(expr, (String, Bool)):
            return expr.value

        if isinstance(expr, Var):
            return self.env.get(expr.name, UNBOUND_VALUE)

        if isinstance(expr, Binary):
            # walk the left spine so long a + b + c chains do not recurse;
            # both sides are always evaluated (no short-circuit)
            spine = []
            node = expr
            while isinstance(node, Binary):
                spine.append(node)
                node = node.left
            value = self.evaluate(node)
            for node in reversed(spine):
                value = binary_op(node.op, value, self.evaluate(node.right))
            return value

        if isinstance(expr, Unary):
            operand = self.evaluate(expr.expr)
            if expr.op == "!":
                return not is_truthy(operand)
            if expr.op == "-":
                return -to_number(operand)
            raise ValueError(f"Unknown unary operator: {expr.op}")

        raise TypeError(f"Unknown expression node: {type(expr).__name__}")


def binary_op(op, a, b):
    if op == "+":
        if isinstance(a, str) or isinstance(b, str):
            return display(a) + display(b)
        return to_number(a) + to_number(b)

    if op == "==":
        return values_equal(a, b)
    if op == "!=":
        return not values_equal(a, b)

    if op == "&&":
        return is_truthy(a) and is_truthy(b)
    if op == "||":
        return is_truthy(a) or is_truthy(b)

    x = to_number(a)
    y = to_number(b)

    if op == "-":
        return x - y
    if op == "*":
        return x * y
    if op == "/":
        if y == 0:
            return math.inf
        return x / y
    if op == "%":
        if y == 0 or math.isinf(x):
            return math.nan
        return math.fmod(x, y)

    if op == ">":
        return x > y
    if op == "<":
        return x < y
    if op == ">=":
        return x >= y
    if op == "<=":
        return x <= y

    raise ValueError(f"Unknown binary operator: {op}")


def execute(statements, interpreter):
    interpreter.execute(statements)


def execute_statement(statement, interpreter) -> Signal:
    return interpreter.execute_statement(statement)


def run_source(source, interpreter=None):
    interpreter = interpreter or Interpreter()
    statements = parse(tokenize(source), err=interpreter.err)
    interpreter.execute(statements)
    return interpreter
