"""Node types shared by the reader, expander and evaluator."""
