# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""Canonical ids for logging resources.

A logging resource (sink, exclusion) lives under a parent collection, and the
id we persist for it is the api resource name, ie.

  projects/my-project/exclusions/my-exclusion
  folders/1234/sinks/my-sink
"""
from collections import namedtuple
import re

from logexclusion.exceptions import (
    MalformedIdError, UnrecognizedResourceTypeError)


# All the parent collections logging resources may be scoped to. Used to
# parse ids safely.
LOGGING_RESOURCE_TYPES = (
    'billingAccount',
    'billingAccounts',
    'folders',
    'organizations',
    'projects',
)


class _LoggingId(object):

    __slots__ = ()

    # literal path segment between the parent and the resource name
    collection = None

    def canonical_id(self):
        return "%s/%s/%s/%s" % (
            self.resource_type, self.resource_id, self.collection, self.name)

    def parent(self):
        """The parent scope, ie. `folders/foo` for `folders/foo/sinks/bar`"""
        return "%s/%s" % (self.resource_type, self.resource_id)

    def __str__(self):
        return self.canonical_id()


class LoggingExclusionId(
        _LoggingId, namedtuple('LoggingExclusionId', 'resource_type resource_id name')):

    __slots__ = ()
    collection = 'exclusions'


class LoggingSinkId(
        _LoggingId, namedtuple('LoggingSinkId', 'resource_type resource_id name')):

    __slots__ = ()
    collection = 'sinks'


def _parse_logging_id(id_type, value, resource_types, label):
    m = re.match(
        r'^(.+)/(.+)/%s/(.+)$' % id_type.collection, value or '')
    if m is None:
        raise MalformedIdError(
            "unable to parse logging %s id %r" % (label, value))
    resource_type, resource_id, name = m.groups()
    if resource_type not in resource_types:
        raise UnrecognizedResourceTypeError(
            "Logging resource type %s is not valid. Valid resource types: %s" % (
                resource_type, ", ".join(resource_types)))
    return id_type(resource_type, resource_id, name)


def parse_logging_exclusion_id(value, resource_types=LOGGING_RESOURCE_TYPES):
    """Parse a canonical exclusion id into a LoggingExclusionId."""
    return _parse_logging_id(
        LoggingExclusionId, value, resource_types, 'exclusion')


def parse_logging_sink_id(value, resource_types=LOGGING_RESOURCE_TYPES):
    """Parse a canonical sink id into a LoggingSinkId."""
    return _parse_logging_id(LoggingSinkId, value, resource_types, 'sink')
