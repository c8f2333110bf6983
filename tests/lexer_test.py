from lexer import Lexer, Token, tokenize


def types(source):
    return [t.type for t in tokenize(source)]


def test_declaration_tokens():
    toks = tokenize("hayde x hiyye 5")
    assert toks == [
        Token("LET"),
        Token("IDENT", "x"),
        Token("ASSIGN"),
        Token("NUMBER", 5.0),
        Token("EOF"),
    ]


def test_empty_source_is_just_eof():
    assert types("") == ["EOF"]
    assert types("   \n\t\r\n") == ["EOF"]


def test_newlines_are_not_forwarded():
    toks = tokenize("hayde a hiyye 1\n\n3mol a\n")
    assert "NEWLINE" not in [t.type for t in toks]
    assert [t.type for t in toks].count("EOF") == 1
    assert toks[-1].type == "EOF"


def test_keyword_table():
    src = "hayde hiyye ong_no_cap cap eza betshil lakan walla deal 3mol highkey lowkey tool_ma kammel khalas"
    assert types(src) == [
        "LET", "ASSIGN", "BOOL", "BOOL", "IF", "COND", "THEN", "ELSE", "END",
        "PRINT", "HIGHKEY", "LOWKEY", "WHILE", "CONTINUE", "BREAK", "EOF",
    ]
    toks = tokenize("ong_no_cap cap")
    assert toks[0].value is True
    assert toks[1].value is False


def test_keyword_prefix_is_identifier():
    toks = tokenize("dealer cap_x _eza")
    assert toks[:3] == [Token("IDENT", "dealer"), Token("IDENT", "cap_x"), Token("IDENT", "_eza")]


def test_digit_keyword():
    assert types('3mol "hi"') == ["PRINT", "STRING", "EOF"]
    # a plain number right before an identifier is not the keyword
    toks = tokenize("3 mol")
    assert toks[0] == Token("NUMBER", 3.0)
    assert toks[1] == Token("IDENT", "mol")


def test_digit_keyword_needs_exact_word():
    toks = tokenize("3molx")
    assert toks[0] == Token("NUMBER", 3.0)
    assert toks[1] == Token("IDENT", "molx")


def test_numbers_are_floats():
    toks = tokenize("42 3.25 0.5")
    assert [t.value for t in toks[:3]] == [42.0, 3.25, 0.5]
    assert all(isinstance(t.value, float) for t in toks[:3])


def test_malformed_number_defaults_to_zero():
    toks = tokenize("1.2.3")
    assert toks[0] == Token("NUMBER", 0.0)
    assert toks[1].type == "EOF"


def test_string_escape_newline():
    toks = tokenize(r'"a\nb"')
    assert toks[0] == Token("STRING", "a\nb")


def test_string_other_backslashes_verbatim():
    toks = tokenize(r'"a\tb"')
    assert toks[0] == Token("STRING", "a\\tb")


def test_unterminated_string_runs_to_end():
    toks = tokenize('3mol "never closed\nhayde')
    assert toks[1] == Token("STRING", "never closed\nhayde")
    assert toks[2].type == "EOF"


def test_comments_are_skipped():
    assert types("// a comment\nhayde // another\n") == ["LET", "EOF"]
    assert types("8 / 2") == ["NUMBER", "SLASH", "NUMBER", "EOF"]


def test_operators():
    assert types("+ - * / % == != > < >= <= && || ! ( )") == [
        "PLUS", "MINUS", "STAR", "SLASH", "PERCENT",
        "EQEQ", "NOTEQ", "GT", "LT", "GTE", "LTE",
        "AND", "OR", "NOT", "LPAREN", "RPAREN", "EOF",
    ]


def test_lone_ampersand_and_pipe_are_dropped():
    assert types("a & b | c") == ["IDENT", "IDENT", "IDENT", "EOF"]


def test_unknown_characters_are_skipped():
    assert types("hayde @ x $ hiyye ; 1 = ") == ["LET", "IDENT", "ASSIGN", "NUMBER", "EOF"]


def test_line_and_column_tracking():
    toks = Lexer("hayde x\n  3mol x").tokenize()
    assert (toks[0].line, toks[0].column) == (1, 1)
    assert (toks[1].line, toks[1].column) == (1, 7)
    assert (toks[2].line, toks[2].column) == (2, 3)
    assert (toks[3].line, toks[3].column) == (2, 8)
