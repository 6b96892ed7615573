# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""Logging exclusions, generic over the parent resource kind.

https://cloud.google.com/logging/docs/reference/v2/rest/v2/projects.exclusions

The same create/read/update/delete handlers serve exclusions on projects,
folders, organizations and billing accounts. Anything specific to the parent
kind (how its id is resolved, which api collection is addressed) lives in a
LoggingExclusionUpdater subclass, and the handlers are built around the
updater's factory.
"""
import abc
import logging

from logexclusion.client import errors
from logexclusion.exceptions import (
    InvalidIdError, RemoteError, RemoteNotFoundError)
from logexclusion.ids import LoggingExclusionId, parse_logging_exclusion_id
from logexclusion.provider import Resource
from logexclusion.schema import merge_schemas

log = logging.getLogger('logexclusion.resources.exclusion')


LOGGING_EXCLUSION_BASE_SCHEMA = {
    'filter': {
        'type': 'string',
        'required': True,
    },
    'name': {
        'type': 'string',
        'required': True,
        'force_new': True,
    },
    'description': {
        'type': 'string',
        'optional': True,
    },
    'disabled': {
        'type': 'bool',
        'optional': True,
        'default': False,
    },
}

# Attributes which can be changed in place, in update mask order.
UPDATABLE_FIELDS = ('description', 'filter', 'disabled')


class LoggingExclusionUpdater(metaclass=abc.ABCMeta):
    """Remote operations on exclusions of a single parent resource.

    Implemented for each resource kind supporting log exclusions.
    Implementations keep track of the parent resource identifier.
    """

    # api collection of the parent, ie. 'projects'
    resource_type = None

    # resource attribute holding the parent id
    parent_field = None

    # other collection names accepted in imported ids
    resource_type_aliases = ()

    def __init__(self, resource_id, config):
        self.resource_id = resource_id
        self.config = config

    @classmethod
    @abc.abstractmethod
    def resolve_resource_id(cls, d, config):
        """Determine the parent id from resource data and provider config.

        Raises ParentResolutionError if it can't be determined.
        """

    @classmethod
    def new(cls, d, config):
        return cls(cls.resolve_resource_id(d, config), config)

    @classmethod
    def import_resource_types(cls):
        return (cls.resource_type,) + tuple(cls.resource_type_aliases)

    def describe_resource(self):
        """Textual description of the parent for use in error messages."""
        return '%s "%s"' % (self.resource_type, self.resource_id)

    def get_client(self):
        return self.config.logging_client('%s.exclusions' % self.resource_type)

    def _execute(self, action, verb, params):
        try:
            return self.get_client().execute_command(verb, params)
        except errors.HttpError as e:
            status = e.resp.status
            error_class = status == 404 and RemoteNotFoundError or RemoteError
            raise error_class(
                "Error %s logging exclusion for %s: %s" % (
                    action, self.describe_resource(), e),
                cause=e, status=status) from e

    def create_exclusion(self, parent, exclusion):
        self._execute('creating', 'create', {'parent': parent, 'body': exclusion})

    def read_exclusion(self, id):
        return self._execute('retrieving', 'get', {'name': id})

    def update_exclusion(self, id, exclusion, update_mask):
        self._execute('updating', 'patch', {
            'name': id, 'body': exclusion, 'updateMask': update_mask})

    def delete_exclusion(self, id):
        self._execute('deleting', 'delete', {'name': id})


def expand_resource_logging_exclusion(d, resource_type, resource_id):
    id = LoggingExclusionId(resource_type, resource_id, d.get('name'))
    exclusion = {
        'name': d.get('name'),
        'description': d.get('description'),
        'filter': d.get('filter'),
        'disabled': d.get('disabled'),
    }
    return id, exclusion


def flatten_resource_logging_exclusion(d, exclusion):
    d.set('name', exclusion['name'])
    d.set('description', exclusion.get('description', ''))
    d.set('filter', exclusion['filter'])
    d.set('disabled', exclusion.get('disabled', False))


def expand_resource_logging_exclusion_for_update(d):
    """Partial exclusion body and update mask for the changed attributes."""
    exclusion = {}
    update_mask = []
    for k in UPDATABLE_FIELDS:
        if d.has_change(k):
            exclusion[k] = d.get(k)
            update_mask.append(k)
    return exclusion, ','.join(update_mask)


def resource_logging_exclusion_create(new_updater):

    def create(d, config):
        updater = new_updater(d, config)
        id, exclusion = expand_resource_logging_exclusion(
            d, updater.resource_type, updater.resource_id)
        updater.create_exclusion(id.parent(), exclusion)
        d.set_id(id.canonical_id())
        return resource_logging_exclusion_read(new_updater)(d, config)

    return create


def resource_logging_exclusion_read(new_updater):

    def read(d, config):
        updater = new_updater(d, config)
        try:
            exclusion = updater.read_exclusion(d.id)
        except RemoteNotFoundError:
            log.warning(
                "Removing Logging Exclusion %s because it's gone", d.id)
            d.set_id('')
            return

        flatten_resource_logging_exclusion(d, exclusion)
        if updater.resource_type == 'projects':
            d.set('project', updater.resource_id)

    return read


def resource_logging_exclusion_update(new_updater):

    def update(d, config):
        updater = new_updater(d, config)
        exclusion, update_mask = expand_resource_logging_exclusion_for_update(d)
        if update_mask:
            updater.update_exclusion(d.id, exclusion, update_mask)
        else:
            log.debug("no changes to logging exclusion %s", d.id)
        return resource_logging_exclusion_read(new_updater)(d, config)

    return update


def resource_logging_exclusion_delete(new_updater):

    def delete(d, config):
        updater = new_updater(d, config)
        updater.delete_exclusion(d.id)
        d.set_id('')

    return delete


def resource_logging_exclusion_import(updater_class):
    """Seed resource data from a canonical id so a read can complete it."""

    def import_state(d, config):
        id = parse_logging_exclusion_id(d.id)
        if id.resource_type not in updater_class.import_resource_types():
            raise InvalidIdError(
                "%s is not an exclusion on %s" % (
                    d.id, updater_class.resource_type))
        # legacy collection aliases are rewritten to the api collection
        d.set_id(LoggingExclusionId(
            updater_class.resource_type, id.resource_id, id.name).canonical_id())
        d.set('name', id.name)
        d.set(updater_class.parent_field, id.resource_id)

    return import_state


def resource_logging_exclusion(type_name, parent_schema, updater_class):
    new_updater = updater_class.new
    return Resource(
        type_name,
        merge_schemas(LOGGING_EXCLUSION_BASE_SCHEMA, parent_schema),
        create=resource_logging_exclusion_create(new_updater),
        read=resource_logging_exclusion_read(new_updater),
        update=resource_logging_exclusion_update(new_updater),
        delete=resource_logging_exclusion_delete(new_updater),
        importer=resource_logging_exclusion_import(updater_class))


def parent_resource_id(value, resource_type):
    """Accept either a bare parent id or its `{resource_type}/{id}` form."""
    prefix = '%s/' % resource_type
    if value and value.startswith(prefix):
        return value[len(prefix):]
    return value
