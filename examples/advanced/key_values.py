"""key = value lines, with one state step emitting several tokens.

lex_pair emits KEY, ASSIGN and VALUE in a single step, so the lexer is
configured with a larger pending-token queue.
"""

import logging

from statelex import (
    EOF_RUNE,
    LexConfig,
    Lexer,
    TokenType,
    is_alpha,
    is_end_of_line,
    profiled_scan,
)

KEY = TokenType("KEY")
ASSIGN = TokenType("ASSIGN")
VALUE = TokenType("VALUE")
COMMENT = TokenType("COMMENT")

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def at_line_end(lexer):
    r = lexer.peek()
    return r == EOF_RUNE or is_end_of_line(r)


def lex_line(lexer):
    lexer.ignore_whitespace()
    if lexer.peek() == EOF_RUNE:
        return None
    if lexer.accept_sequence("//"):
        return lex_comment
    if is_alpha(lexer.peek()):
        return lex_pair
    return lexer.errorf("expected key or comment, got %r", lexer.next())


def lex_comment(lexer):
    while not at_line_end(lexer):
        lexer.next()
    lexer.emit(COMMENT)
    return lex_line


def lex_pair(lexer):
    lexer.accept_alpha()
    lexer.emit(KEY)
    lexer.accept_run(" \t")
    lexer.ignore()
    if not lexer.accept("="):
        return lexer.errorf("expected '=' after key")
    lexer.emit(ASSIGN)
    lexer.accept_run(" \t")
    lexer.ignore()
    while not at_line_end(lexer):
        lexer.next()
    lexer.emit(VALUE)
    return lex_line


SOURCE = """\
// connection settings
host = example.org
port = 8080
user name = nobody
"""

with profiled_scan() as metrics:
    lexer = Lexer(SOURCE, lex_line, config=LexConfig(queue_capacity=3))
    for token in lexer.tokenize():
        print(token)

print(metrics.summary())
