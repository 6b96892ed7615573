# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""Resource attribute schemas and the resource data handed to handlers.

An attribute schema is a mapping of attribute name to field definition::

  {'name': {'type': 'string', 'required': True, 'force_new': True},
   'disabled': {'type': 'bool', 'optional': True, 'default': False}}

ResourceData pairs the prior persisted state of a resource with its desired
configuration, and collects the attributes handlers set from remote state.
"""
import copy

from jsonschema import Draft7Validator

from logexclusion.exceptions import ResourceValidationError

ZERO_VALUES = {
    'string': '',
    'bool': False,
}

JSON_TYPES = {
    'string': 'string',
    'bool': 'boolean',
}


def merge_schemas(*schemas):
    merged = {}
    for s in schemas:
        merged.update(copy.deepcopy(s))
    return merged


def zero_value(field):
    if 'default' in field:
        return field['default']
    return ZERO_VALUES[field['type']]


def json_schema(schema):
    """Generate a json schema for validating desired attribute values."""
    required = sorted(k for k, f in schema.items() if f.get('required'))
    doc = {
        'type': 'object',
        'additionalProperties': False,
        'properties': {
            k: {'type': JSON_TYPES[f['type']]} for k, f in schema.items()},
    }
    if required:
        doc['required'] = required
    return doc


class ResourceData(object):

    def __init__(self, schema, state=None, config=None, id=''):
        self.schema = schema
        self._state = dict(state or {})
        if config is None:
            config = self._state
        self._config = dict(config)
        self._set = {}
        self._id = id or ''

    def __repr__(self):
        return "<ResourceData id:%r>" % self._id

    @property
    def id(self):
        return self._id

    def set_id(self, value):
        self._id = value or ''

    def _field(self, key):
        try:
            return self.schema[key]
        except KeyError:
            raise KeyError("Invalid attribute %r" % key)

    def _desired(self, key, field):
        value = self._config.get(key)
        # computed attributes left out of the config keep their prior value,
        # anything else left out goes back to its zero value
        if value is None and field.get('computed'):
            value = self._state.get(key)
        return zero_value(field) if value is None else value

    def get(self, key):
        field = self._field(key)
        if self._set.get(key) is not None:
            return self._set[key]
        return self._desired(key, field)

    def set(self, key, value):
        self._field(key)
        self._set[key] = value

    def get_change(self, key):
        field = self._field(key)
        old = self._state.get(key)
        return (
            zero_value(field) if old is None else old,
            self._desired(key, field))

    def has_change(self, key):
        old, new = self.get_change(key)
        return old != new

    def requires_new(self):
        """Force new attributes whose desired value differs from prior state."""
        changed = []
        for k, f in sorted(self.schema.items()):
            if not f.get('force_new'):
                continue
            # computed attributes left unset keep whatever was resolved
            if f.get('computed') and self._config.get(k) is None:
                continue
            if self.has_change(k):
                changed.append(k)
        return changed

    def validate(self, resource_type):
        config = {k: v for k, v in self._config.items() if v is not None}
        errors = sorted(
            Draft7Validator(json_schema(self.schema)).iter_errors(config),
            key=lambda e: list(e.path))
        if errors:
            raise ResourceValidationError(
                resource_type, [e.message for e in errors])
        return self

    def state(self):
        """Attributes to persist, or None once the resource is gone."""
        if not self._id:
            return None
        s = {k: self.get(k) for k in sorted(self.schema)}
        s['id'] = self._id
        return s
