"""Testing support – Hypothesis strategies for cache key inputs and labels."""

from cachekeys.testing.generators import (
    key_inputs_strategy,
    key_value_strategy,
    type_label_strategy,
)

__all__ = [
    "key_inputs_strategy",
    "key_value_strategy",
    "type_label_strategy",
]
