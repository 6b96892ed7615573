# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from functools import wraps
import logging
import os
import sys

from tabulate import tabulate

from logexclusion.config import Config
from logexclusion.exceptions import ProviderError
from logexclusion.provider import load_resources, resources
from logexclusion.utils import load_file, yaml_dump

log = logging.getLogger('logexclusion.commands')

FIELD_FLAGS = ('required', 'optional', 'computed', 'force_new')


def resource_command(f):
    """Resolve the resource type and provider config for a command."""

    @wraps(f)
    def _load_resource(options):
        load_resources()
        resource = resources.get(options.resource)
        if resource is None:
            raise ProviderError(
                "Unknown resource type %r, valid types: %s" % (
                    options.resource, ", ".join(sorted(resources.keys()))))
        config = Config.empty().from_cli(options).validate()
        return f(options, resource, config)

    return _load_resource


def load_resource_file(path):
    path = os.path.expanduser(path)
    if not os.path.exists(path):
        raise ValueError("Invalid path for resource file %r" % path)
    data = load_file(path)
    if not isinstance(data, dict):
        raise ValueError("Resource file %s must contain a mapping" % path)
    return data


def _print_state(d):
    print(yaml_dump(d.state()))


@resource_command
def create_cmd(options, resource, config):
    attrs = load_resource_file(options.file)
    d = resource.create(resource.data(config=attrs), config)
    _print_state(d)


@resource_command
def import_cmd(options, resource, config):
    d = resource.import_state(options.id, config)
    if not d.id:
        log.error("%s %s not found", resource.type, options.id)
        sys.exit(1)
    _print_state(d)


@resource_command
def update_cmd(options, resource, config):
    attrs = load_resource_file(options.file)
    prior = resource.import_state(options.id, config)
    if not prior.id:
        log.error("%s %s not found", resource.type, options.id)
        sys.exit(1)
    state = prior.state()
    id = state.pop('id')
    d = resource.update(
        resource.data(state=state, config=attrs, id=id), config)
    _print_state(d)


@resource_command
def delete_cmd(options, resource, config):
    d = resource.delete(resource.from_id(options.id, config), config)
    log.info("deleted %s %s", resource.type, options.id)
    return d


def schema_cmd(options):
    """Print info about the available resources and their attributes."""
    load_resources()
    if not options.resource:
        print(yaml_dump({'resources': sorted(resources.keys())}))
        return

    resource = resources.get(options.resource)
    if resource is None:
        log.error("resource %s not found", options.resource)
        sys.exit(1)

    rows = []
    for name, field in sorted(resource.schema.items()):
        rows.append(
            [name, field['type']] + [field.get(k) and 'yes' or 'no' for k in FIELD_FLAGS])
    print(tabulate(rows, headers=['attribute', 'type'] + list(FIELD_FLAGS)))
