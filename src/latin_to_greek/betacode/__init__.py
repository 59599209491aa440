"""
Beta Code conversion submodule.

Re-exports the tokenizer, sigma finalizer and converter.
"""

from latin_to_greek.betacode._rules import (
    BetaCodeConverter,
    ConversionResult,
    Failure,
    Run,
    convert,
    convert_lines,
    finalize_sigma,
    tokenize,
)

__all__ = [
    "BetaCodeConverter",
    "ConversionResult",
    "Failure",
    "Run",
    "convert",
    "convert_lines",
    "finalize_sigma",
    "tokenize",
]
