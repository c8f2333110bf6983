class ASTNode:
    # Optional source line (1-based). Parser may set this.
    line: int | None = None

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items() if k != "line")
        return f"{self.__class__.__name__}({fields})"

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        mine = {k: v for k, v in vars(self).items() if k != "line"}
        theirs = {k: v for k, v in vars(other).items() if k != "line"}
        return mine == theirs


# ---------- EXPRESSIONS ----------

class Number(ASTNode):
    def __init__(self, value):
        self.value = value  # float


class String(ASTNode):
    def __init__(self, value):
        self.value = value


class Bool(ASTNode):
    def __init__(self, value):
        self.value = value


class Var(ASTNode):
    def __init__(self, name):
        self.name = name  # resolved at evaluation time


class Binary(ASTNode):
    def __init__(self, left, op, right):
        self.left = left
        self.op = op      # "+", "==", "&&", ...
        self.right = right


class Unary(ASTNode):
    def __init__(self, op, expr):
        self.op = op      # "!" or "-"
        self.expr = expr


# ---------- STATEMENTS ----------

class VarDecl(ASTNode):
    def __init__(self, name, value):
        self.name = name
        self.value = value


class Assign(ASTNode):
    def __init__(self, name, value):
        self.name = name
        self.value = value


class Print(ASTNode):
    def __init__(self, expr):
        self.expr = expr


class DebugPrint(ASTNode):
    def __init__(self, expr):
        self.expr = expr


class If(ASTNode):
    def __init__(self, condition, then_block, else_block=None):
        self.condition = condition
        self.then_block = then_block  # list of statements
        self.else_block = else_block  # list of statements | None


class While(ASTNode):
    def __init__(self, condition, body):
        self.condition = condition
        self.body = body


class Break(ASTNode):
    pass


class Continue(ASTNode):
    pass
