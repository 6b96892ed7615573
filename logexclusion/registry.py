# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
from importlib.metadata import entry_points


class PluginRegistry(object):
    """A plugin registry

    A simple string to object map, with python package entry_point
    loading for external plugins.

    As an example of defining an external resource via a python package

    ```python
    setup(
      name="logexclusion_extra",
      version='1.0',
      packages=find_packages(),
      entry_points={
         'logexclusion.resources': [
            'extra = logexclusion_extra:register']},
      )
    ```

    For loading the plugins we can simply invoke method:load_plugins like
    so::

      PluginRegistry('logexclusion.resources').load_plugins()
    """

    def __init__(self, plugin_type):
        self.plugin_type = plugin_type
        self._factories = {}

    def register(self, name, klass=None):
        # invoked as function
        if klass is not None:
            self._factories[name] = klass
            return klass

        # invoked as class decorator
        def _register_class(klass):
            self._factories[name] = klass
            return klass
        return _register_class

    def unregister(self, name):
        if name in self._factories:
            del self._factories[name]

    def get(self, name):
        return self._factories.get(name)

    def keys(self):
        return self._factories.keys()

    def items(self):
        return self._factories.items()

    def __contains__(self, name):
        return name in self._factories

    def __iter__(self):
        return iter(self._factories)

    def __len__(self):
        return len(self._factories)

    def load_plugins(self):
        """Load external plugins registered under our entry point group."""
        for ep in entry_points(group=self.plugin_type):
            f = ep.load()
            f()
