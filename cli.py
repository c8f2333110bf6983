import sys
import traceback

from interpreter import Interpreter, Signal
from lexer import tokenize
from parser import Parser

USAGE = [
    "Usage:",
    "  python cli.py <file.faysal>      run a script",
    "  python cli.py                    start the REPL",
    "  (optional) --debug to print tokens, AST and Python tracebacks",
    "  (optional) --max-steps N to stop runaway loops",
]


# Simple AST printer (so you can SEE what the parser built)
def ast_to_dict(node):
    if node is None:
        return None
    if isinstance(node, list):
        return [ast_to_dict(s) for s in node]

    t = node.__class__.__name__
    d = {"type": t}

    if t in ("Number", "String", "Bool"):
        d["value"] = node.value
    elif t == "Var":
        d["name"] = node.name
    elif t == "Binary":
        d["op"] = node.op
        d["left"] = ast_to_dict(node.left)
        d["right"] = ast_to_dict(node.right)
    elif t == "Unary":
        d["op"] = node.op
        d["expr"] = ast_to_dict(node.expr)
    elif t in ("VarDecl", "Assign"):
        d["name"] = node.name
        d["value"] = ast_to_dict(node.value)
    elif t in ("Print", "DebugPrint"):
        d["expr"] = ast_to_dict(node.expr)
    elif t == "If":
        d["condition"] = ast_to_dict(node.condition)
        d["then_block"] = ast_to_dict(node.then_block)
        d["else_block"] = ast_to_dict(node.else_block)
    elif t == "While":
        d["condition"] = ast_to_dict(node.condition)
        d["body"] = ast_to_dict(node.body)
    elif t in ("Break", "Continue"):
        pass
    else:
        d["raw"] = str(node)

    return d


def pretty(obj, indent=0):
    sp = "  " * indent
    if isinstance(obj, dict):
        lines = []
        for k, v in obj.items():
            if isinstance(v, (dict, list)):
                lines.append(f"{sp}{k}:")
                lines.append(pretty(v, indent + 1))
            else:
                lines.append(f"{sp}{k}: {v!r}" if isinstance(v, str) else f"{sp}{k}: {v}")
        return "\n".join(lines)
    if isinstance(obj, list):
        lines = []
        for item in obj:
            lines.append(f"{sp}-")
            lines.append(pretty(item, indent + 1))
        return "\n".join(lines)
    return f"{sp}{obj}"


def trace(tokens, statements):
    print(f"Tokens: {tokens}")
    print("AST:")
    print(pretty(ast_to_dict(statements), 1))


def usage_exit(code=1):
    for line in USAGE:
        print(line)
    sys.exit(code)


def cmd_run(path, debug: bool = False, max_steps=None):
    try:
        with open(path, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"Error: cannot read {path}: {e.strerror or e}", file=sys.stderr)
        sys.exit(1)

    if not code.strip():
        print(f"Error: {path} is empty", file=sys.stderr)
        usage_exit(1)

    try:
        tokens = tokenize(code)
        statements = Parser(tokens).parse()
        if debug:
            trace(tokens, statements)

        Interpreter(max_steps=max_steps).execute(statements)
    except Exception as e:
        if debug:
            traceback.print_exc()
        else:
            print(str(e), file=sys.stderr)
        sys.exit(1)


def cmd_repl(debug: bool = False, max_steps=None):
    # One interpreter keeps its variables across all inputs.
    interpreter = Interpreter(max_steps=max_steps)

    print("Faysal Lang REPL. Type exit to quit.")

    while True:
        try:
            line = input("faysal> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        stripped = line.strip()
        if stripped == "exit":
            break
        if not stripped:
            continue

        try:
            tokens = tokenize(line)
            statements = Parser(tokens).parse()
            if debug:
                trace(tokens, statements)

            for stmt in statements:
                # khalas at the top of a line drops the rest of that line
                if interpreter.execute_statement(stmt) is Signal.BREAK:
                    break
        except Exception as e:
            if debug:
                traceback.print_exc()
            else:
                print(str(e), file=sys.stderr)
        finally:
            # the step budget applies per input line
            interpreter.steps = 0


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    if "-h" in args or "--help" in args:
        usage_exit(0)

    debug = False
    if "--debug" in args:
        debug = True
        args.remove("--debug")

    max_steps = None
    if "--max-steps" in args:
        i = args.index("--max-steps")
        try:
            max_steps = int(args[i + 1])
        except (IndexError, ValueError):
            print("--max-steps expects an integer")
            usage_exit(1)
        del args[i : i + 2]

    for arg in args:
        if arg.startswith("-"):
            print(f"Unknown option: {arg}")
            usage_exit(1)

    if len(args) > 1:
        usage_exit(1)

    if not args:
        cmd_repl(debug=debug, max_steps=max_steps)
        return

    cmd_run(args[0], debug=debug, max_steps=max_steps)


if __name__ == "__main__":
    main()
