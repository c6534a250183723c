"""Interpreter pipeline: tokens, lexer, AST, parser, objects, evaluator."""
