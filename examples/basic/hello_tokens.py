"""Tokenize an arithmetic expression in a few lines, zero deps."""

from lexora import common, tokenize

tokens = tokenize(
    "12+3*45",
    literals=[("add", "+"), ("mul", "*")],
    patterns=[common.UNSIGNED_INT],
)
for token in tokens:
    print(token.name, repr(token.value), token.position)
