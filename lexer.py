class Token:
    def __init__(self, type, value=None, line=1, column=1):
        self.type = type
        self.value = value
        self.line = line
        self.column = column

    def __repr__(self):
        if self.value is not None:
            return f"{self.type}({self.value!r})"
        return f"{self.type}"

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))


# exact-match keyword table, checked before IDENT classification
KEYWORDS = {
    "hayde": ("LET", None),
    "hiyye": ("ASSIGN", None),
    "ong_no_cap": ("BOOL", True),
    "cap": ("BOOL", False),
    "eza": ("IF", None),
    "betshil": ("COND", None),
    "lakan": ("THEN", None),
    "walla": ("ELSE", None),
    "deal": ("END", None),
    "3mol": ("PRINT", None),
    "highkey": ("HIGHKEY", None),
    "lowkey": ("LOWKEY", None),
    "tool_ma": ("WHILE", None),
    "kammel": ("CONTINUE", None),
    "khalas": ("BREAK", None),
}

# the one keyword that starts like a number
DIGIT_KEYWORD = "3mol"

SINGLE_CHAR_TOKENS = {
    "+": "PLUS",
    "-": "MINUS",
    "*": "STAR",
    "/": "SLASH",
    "%": "PERCENT",
    "(": "LPAREN",
    ")": "RPAREN",
}


class Lexer:
    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.current_char = text[0] if text else None
        self.line = 1
        self.column = 1

    def advance(self):
        # track line/column based on current_char before moving
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        if self.pos >= len(self.text):
            self.current_char = None
        else:
            self.current_char = self.text[self.pos]

    def peek(self):
        nxt = self.pos + 1
        if nxt >= len(self.text):
            return None
        return self.text[nxt]

    def skip_whitespace(self):
        while self.current_char and self.current_char in " \t\r":
            self.advance()

    def skip_comment(self):
        while self.current_char and self.current_char != "\n":
            self.advance()

    def _word_at(self, pos):
        end = pos
        while end < len(self.text) and (self.text[end].isalnum() or self.text[end] == "_"):
            end += 1
        return self.text[pos:end]

    def read_identifier(self):
        start_line, start_col = self.line, self.column
        result = ""
        while self.current_char and (self.current_char.isalnum() or self.current_char == "_"):
            result += self.current_char
            self.advance()

        if result in KEYWORDS:
            type, value = KEYWORDS[result]
            return Token(type, value, line=start_line, column=start_col)
        return Token("IDENT", result, line=start_line, column=start_col)

    def read_number(self):
        start_line, start_col = self.line, self.column
        result = ""
        while self.current_char and (self.current_char.isdigit() or self.current_char == "."):
            result += self.current_char
            self.advance()

        # "1.2.3" and friends fall back to zero
        try:
            value = float(result)
        except ValueError:
            value = 0.0
        return Token("NUMBER", value, line=start_line, column=start_col)

    def read_string(self):
        start_line, start_col = self.line, self.column
        self.advance()  # skip opening quote
        result = ""

        while self.current_char is not None and self.current_char != '"':
            if self.current_char == "\\" and self.peek() == "n":
                result += "\n"
                self.advance()
                self.advance()
                continue
            result += self.current_char
            self.advance()

        # an unterminated string simply runs to end of input
        if self.current_char == '"':
            self.advance()
        return Token("STRING", result, line=start_line, column=start_col)

    def two_char(self, second, double_type, single_type):
        start_line, start_col = self.line, self.column
        self.advance()
        if self.current_char == second:
            self.advance()
            return Token(double_type, line=start_line, column=start_col)
        if single_type is None:
            return None
        return Token(single_type, line=start_line, column=start_col)

    def get_next_token(self):
        while self.current_char:

            # line breaks carry no meaning for the parser
            if self.current_char in " \t\r\n":
                if self.current_char == "\n":
                    self.advance()
                self.skip_whitespace()
                continue

            if self.current_char == "/" and self.peek() == "/":
                self.skip_comment()
                continue

            if self.current_char.isdigit():
                if self._word_at(self.pos) == DIGIT_KEYWORD:
                    return self.read_identifier()
                return self.read_number()

            if self.current_char.isalpha() or self.current_char == "_":
                return self.read_identifier()

            if self.current_char == '"':
                return self.read_string()

            if self.current_char == "=":
                tok = self.two_char("=", "EQEQ", None)
                if tok is not None:
                    return tok
                continue

            if self.current_char == "!":
                return self.two_char("=", "NOTEQ", "NOT")
            if self.current_char == "<":
                return self.two_char("=", "LTE", "LT")
            if self.current_char == ">":
                return self.two_char("=", "GTE", "GT")

            # a lone & or | is dropped
            if self.current_char == "&":
                tok = self.two_char("&", "AND", None)
                if tok is not None:
                    return tok
                continue
            if self.current_char == "|":
                tok = self.two_char("|", "OR", None)
                if tok is not None:
                    return tok
                continue

            if self.current_char in SINGLE_CHAR_TOKENS:
                start_line, start_col = self.line, self.column
                type = SINGLE_CHAR_TOKENS[self.current_char]
                self.advance()
                return Token(type, line=start_line, column=start_col)

            # anything else is skipped without a word
            self.advance()

        return Token("EOF", line=self.line, column=self.column)

    def tokenize(self):
        tokens = []
        while True:
            tok = self.get_next_token()
            tokens.append(tok)
            if tok.type == "EOF":
                return tokens


def tokenize(source):
    return Lexer(source).tokenize()
