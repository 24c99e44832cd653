"""Reader: lexer and parser turning source text into nodes."""
