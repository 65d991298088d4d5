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
from typing import Any, Dict, List, Optional
from undy import times, extend

# schema forms understood by Generator.create():
#   'word'                              -> faker provider, or the literal string if faker has none
#   ('pyint', {'min_value': 1})         -> faker provider with kwargs
#   {'_qen_provider': 'choice', 'from': [...]}
#   {'_qen_provider': 'literal', 'value': x}
#   {'_qen_provider': 'ref', 'key': 'name', 'format': '{}!'}
#   {'_qen_provider': 'maybe', 'p': 0.2, 'of': <schema>}   -> none with probability p
#   {'_qen_provider': 'sequence', 'start': 1}              -> 1, 2, 3 ... across records
#   nested dicts are generated field by field, earlier fields visible to 'ref'


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._counters: Dict[int, int] = {}

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            index = self._rng.integers(0, len(config["from"]))
            return config["from"][index]

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return config["format"].format(context[key]) if "format" in config else context[key]

        if provider == "maybe":
            if self._rng.random() < config.get("p", 0.5):
                return None
            return self.create(config["of"], context)

        if provider == "sequence":
            slot = id(config)
            self._counters[slot] = self._counters.get(slot, config.get("start", 1) - 1) + 1
            return self._counters[slot]

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)
            record = {}
            for key, field_schema in schema.items():
                # refs can see the parent context and the fields generated so far
                record[key] = self.create(field_schema, extend({}, current_context, record))
            return record

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> List[Any]:
        """generate `count` records"""
        return times(count, lambda _: self._generator.create(self._schema))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
