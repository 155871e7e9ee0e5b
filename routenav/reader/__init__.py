"""Text-level readers for route-definition modules.

``lexer`` holds the small primitives (balanced parens, quoted arguments,
children arrays); ``scanner`` turns a whole document into route tokens.
"""
