'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from ordinq import Maybe
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter for randomized comparator inputs."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        elif provider == "choice":
            # pick by index so non-scalar choices (lists, Maybe) come back untouched
            options = config["from"]
            return options[int(self._rng.integers(len(options)))]

        elif provider == "maybe":
            # an optional value: empty with probability absent_rate, otherwise present
            if "of" not in config:
                raise ValueError("_qen_provider 'maybe' requires an 'of' key.")
            if self._rng.random() < config.get("absent_rate", 0.25):
                return None if config.get("as_none", False) else Maybe.empty()
            value = self.create(config["of"], context)
            return value if config.get("as_none", False) else Maybe.of(value)

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        # if context is none, it becomes an empty dict.
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # create a new object, building a local context sequentially
            generated_obj = {}
            for k, v in schema.items():
                # refs can look up into the parent and sideways into the local object
                merged_context = {**current_context, **generated_obj}
                generated_obj[k] = self.create(v, merged_context)
            return generated_obj

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            count = self._get_count(item_schema)
            # the item schema sits under '_qen_items' when a count is given
            actual_item_schema = item_schema.get('_qen_items', item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual_item_schema, current_context) for _ in range(count)]

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def _get_count(self, item_schema: Any) -> int:
        count = 5 # default count
        if isinstance(item_schema, dict) and "_qen_count" in item_schema:
            count_config = item_schema["_qen_count"]
            if isinstance(count_config, int):
                count = count_config
            elif isinstance(count_config, (list, tuple)) and len(count_config) == 2:
                low, high = count_config
                count = int(self._rng.integers(low, high, endpoint=True))
        return count


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> List[Any]:
        # the initial call to create() will have context=none
        return [self._generator.create(self._schema) for _ in range(count)]


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
