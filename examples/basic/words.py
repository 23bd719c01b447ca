"""Words, numbers and colons: a four-state grammar in a few lines."""

from statelex import EOF_RUNE, Lexer, TokenType, is_alpha, is_digit

WORD = TokenType("WORD")
NUMBER = TokenType("NUMBER")
PUNCTUATION = TokenType("PUNCTUATION")


def lex(lexer):
    lexer.ignore_whitespace()
    if lexer.peek() == EOF_RUNE:
        return None
    if is_alpha(lexer.peek()):
        return lex_word
    if is_digit(lexer.peek()):
        return lex_number
    return lex_punctuation


def lex_word(lexer):
    lexer.accept_alpha()
    lexer.emit(WORD)
    return lex


def lex_number(lexer):
    lexer.accept_digits()
    lexer.emit(NUMBER)
    return lex


def lex_punctuation(lexer):
    if not lexer.accept(":"):
        return lexer.errorf("bad punctuation %r", lexer.next())
    lexer.emit(PUNCTUATION)
    return lex


for token in Lexer("this is a string of words and numbers: 1234567890abc.", lex).tokenize():
    print(token)
