import sys

from ast_nodes import (
    Number, String, Bool, Var, Binary, Unary,
    VarDecl, Assign, Print, DebugPrint, If, While, Break, Continue,
)
from errors import ParseError
from lexer import Token


class Parser:
    def __init__(self, tokens, err=None):
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].type != "EOF":
            self.tokens.append(Token("EOF"))
        self.pos = 0
        self.err = err
        self.errors = []  # ParseErrors recovered from, in order

    @property
    def current_token(self):
        return self.tokens[self.pos]

    def advance(self):
        # never walk past EOF
        if self.pos < len(self.tokens) - 1:
            self.pos += 1

    # move to next token, but only if it matches what we expect
    def eat(self, token_type):
        if self.current_token.type == token_type:
            tok = self.current_token
            self.advance()
            return tok
        tok = self.current_token
        raise ParseError(f"Expected {token_type}, got {tok.type}", tok)

    def error_here(self, message):
        raise ParseError(message, self.current_token)

    def accept(self, token_type):
        # optional marker keywords (betshil, lakan, highkey, closing paren)
        if self.current_token.type == token_type:
            self.advance()
            return True
        return False

    def report(self, error):
        self.errors.append(error)
        print(f"Parse error: {error}", file=self.err or sys.stderr)

    # ---------- TOP LEVEL ----------
    def parse(self):
        return self.statement_list(())

    def statement_list(self, terminators):
        statements = []
        while self.current_token.type != "EOF" and self.current_token.type not in terminators:
            start = self.pos
            try:
                statements.append(self.statement())
            except ParseError as e:
                self.report(e)
                if self.pos == start:
                    self.advance()
            except RecursionError:
                self.report(ParseError("Expression nested too deeply", self.tokens[start]))
                self.synchronize(terminators)
        return statements

    def synchronize(self, terminators):
        # drop the rest of a statement we gave up on
        self.advance()
        while self.current_token.type not in STATEMENT_STARTS and self.current_token.type not in terminators:
            if self.current_token.type == "EOF":
                return
            self.advance()

    # ---------- STATEMENTS ----------
    def statement(self):
        tok_type = self.current_token.type

        if tok_type == "LET":
            return self.var_decl()
        if tok_type == "PRINT":
            return self.print_statement()
        if tok_type == "LOWKEY":
            return self.debug_statement()
        if tok_type == "IF":
            return self.if_statement()
        if tok_type == "WHILE":
            return self.while_statement()

        if tok_type == "CONTINUE":
            tok = self.eat("CONTINUE")
            node = Continue()
            node.line = tok.line
            return node

        if tok_type == "BREAK":
            tok = self.eat("BREAK")
            node = Break()
            node.line = tok.line
            return node

        # otherwise it must be `name hiyye expr`
        if tok_type == "IDENT":
            return self.assignment()

        self.error_here(f"Unexpected token in statement: {tok_type}")

    def var_decl(self):
        tok = self.eat("LET")
        if self.current_token.type != "IDENT":
            self.error_here("Expected variable name after hayde")
        name = self.eat("IDENT").value
        self.eat("ASSIGN")
        node = VarDecl(name, self.expr())
        node.line = tok.line
        return node

    def assignment(self):
        name_token = self.eat("IDENT")
        if self.current_token.type != "ASSIGN":
            self.error_here(f"After a name, expected hiyye, got {self.current_token.type}")
        self.eat("ASSIGN")
        node = Assign(name_token.value, self.expr())
        node.line = name_token.line
        return node

    def print_statement(self):
        tok = self.eat("PRINT")
        self.accept("HIGHKEY")
        node = Print(self.expr())
        node.line = tok.line
        return node

    def debug_statement(self):
        tok = self.eat("LOWKEY")
        node = DebugPrint(self.expr())
        node.line = tok.line
        return node

    def if_statement(self):
        # Grammar:
        #   IF COND? expr THEN? statements (ELSE statements)? END?
        tok = self.eat("IF")
        self.accept("COND")
        condition = self.expr()
        self.accept("THEN")

        then_block = self.statement_list(("END", "ELSE"))
        else_block = None
        if self.accept("ELSE"):
            else_block = self.statement_list(("END",))
        self.accept("END")

        node = If(condition, then_block, else_block)
        node.line = tok.line
        return node

    def while_statement(self):
        # Grammar:
        #   WHILE COND? expr THEN? statements END?
        tok = self.eat("WHILE")
        self.accept("COND")
        condition = self.expr()
        self.accept("THEN")

        body = self.statement_list(("END",))
        self.accept("END")

        node = While(condition, body)
        node.line = tok.line
        return node

    # ---------- EXPRESSIONS ----------
    # expr -> or_expr
    def expr(self):
        return self.or_expr()

    def binary_level(self, operand, operators):
        # left-assoc fold: a op b op c -> (a op b) op c
        node = operand()
        while self.current_token.type in operators:
            op_token = self.current_token
            self.advance()
            right = operand()
            node = Binary(node, operators[op_token.type], right)
            node.line = op_token.line
        return node

    # or_expr -> and_expr (|| and_expr)*
    def or_expr(self):
        return self.binary_level(self.and_expr, {"OR": "||"})

    # and_expr -> comparison (&& comparison)*
    def and_expr(self):
        return self.binary_level(self.comparison, {"AND": "&&"})

    # comparison -> term ((==|!=|<|<=|>|>=) term)*
    def comparison(self):
        return self.binary_level(self.term, COMPARISON_OPS)

    # term -> factor ((+|-) factor)*
    def term(self):
        return self.binary_level(self.factor, {"PLUS": "+", "MINUS": "-"})

    # factor -> unary ((*|/|%) unary)*
    def factor(self):
        return self.binary_level(self.unary, {"STAR": "*", "SLASH": "/", "PERCENT": "%"})

    # unary -> (! unary) | (- unary) | primary
    def unary(self):
        tok = self.current_token
        if tok.type in ("NOT", "MINUS"):
            self.advance()
            node = Unary("!" if tok.type == "NOT" else "-", self.unary())
            node.line = tok.line
            return node
        return self.primary()

    # primary -> NUMBER | STRING | BOOL | IDENT | (expr)
    def primary(self):
        tok = self.current_token

        if tok.type == "NUMBER":
            self.advance()
            node = Number(tok.value)
        elif tok.type == "STRING":
            self.advance()
            node = String(tok.value)
        elif tok.type == "BOOL":
            self.advance()
            node = Bool(tok.value)
        elif tok.type == "IDENT":
            self.advance()
            node = Var(tok.value)
        elif tok.type == "LPAREN":
            self.advance()
            node = self.expr()
            # a missing ')' is forgiven
            self.accept("RPAREN")
            return node
        else:
            self.error_here(f"Unexpected token in expression: {tok.type}")

        node.line = tok.line
        return node


STATEMENT_STARTS = ("LET", "PRINT", "LOWKEY", "IF", "WHILE", "CONTINUE", "BREAK")

COMPARISON_OPS = {
    "EQEQ": "==",
    "NOTEQ": "!=",
    "GT": ">",
    "LT": "<",
    "GTE": ">=",
    "LTE": "<=",
}


def parse(tokens, err=None):
    return Parser(tokens, err=err).parse()
