"""Testing generators – property-based test data for cache keys."""
from cachekeys.testing.generators.strategies import (
    key_inputs_strategy,
    key_value_strategy,
    type_label_strategy,
)

__all__ = [
    "key_inputs_strategy",
    "key_value_strategy",
    "type_label_strategy",
]
