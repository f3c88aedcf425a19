"""rpnkalk package: tokenizer, shunting-yard converter, postfix evaluator and CLI."""

__all__ = [
    "config",
    "tokenizer",
    "shunting_yard",
    "evaluator",
    "operators",
    "api",
    "history",
    "cli",
    "types",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate_expression",
    "convert_to_postfix",
    "validate_expression",
]
