# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import logging

from logexclusion.exceptions import ProviderError, ReplacementRequiredError
from logexclusion.registry import PluginRegistry
from logexclusion.schema import ResourceData

log = logging.getLogger('logexclusion.provider')

resources = PluginRegistry('logexclusion.resources')


class Resource(object):
    """A declarative resource type and its lifecycle handlers.

    Handlers are plain functions taking (ResourceData, Config). The host
    engine decides when to call which; this wrapper only validates the
    desired configuration and logs each step.
    """

    def __init__(self, type_name, schema, create, read, update, delete,
                 importer=None):
        self.type = type_name
        self.schema = schema
        self._create = create
        self._read = read
        self._update = update
        self._delete = delete
        self._importer = importer

    def __repr__(self):
        return "<Resource %s>" % self.type

    def data(self, state=None, config=None, id=''):
        return ResourceData(self.schema, state=state, config=config, id=id)

    def create(self, d, config):
        d.validate(self.type)
        log.info("creating %s %s", self.type, d.get('name'))
        self._create(d, config)
        return d

    def read(self, d, config):
        log.debug("reading %s %s", self.type, d.id)
        self._read(d, config)
        return d

    def update(self, d, config):
        d.validate(self.type)
        replace = d.requires_new()
        if replace:
            raise ReplacementRequiredError(
                "%s %s: changing %s requires a new resource" % (
                    self.type, d.id, ", ".join(replace)))
        log.info("updating %s %s", self.type, d.id)
        self._update(d, config)
        return d

    def delete(self, d, config):
        log.info("deleting %s %s", self.type, d.id)
        self._delete(d, config)
        return d

    @property
    def importable(self):
        return self._importer is not None

    def from_id(self, id, config):
        """Resource data seeded with what the canonical id tells us."""
        if self._importer is None:
            raise ProviderError("%s does not support import" % self.type)
        d = self.data(id=id)
        self._importer(d, config)
        return d

    def import_state(self, id, config):
        """Adopt an existing remote resource given only its canonical id."""
        log.info("importing %s %s", self.type, id)
        return self.read(self.from_id(id, config), config)


def load_resources():
    import logexclusion.resources.billing  # noqa: F401
    import logexclusion.resources.folder  # noqa: F401
    import logexclusion.resources.organization  # noqa: F401
    import logexclusion.resources.project  # noqa: F401
    resources.load_plugins()
    return resources
