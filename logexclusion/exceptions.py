# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0


class ProviderError(Exception):
    """Provider Exception Base Class
    """


class InvalidIdError(ProviderError):
    """Canonical id could not be interpreted
    """


class MalformedIdError(InvalidIdError):
    """Canonical id does not match the id grammar
    """


class UnrecognizedResourceTypeError(InvalidIdError):
    """Canonical id names a parent collection we don't know about
    """


class ParentResolutionError(ProviderError):
    """Parent resource id could not be determined
    """


class ResourceValidationError(ProviderError):
    """Declarative resource data failed schema validation
    """

    def __init__(self, resource_type, errors):
        self.resource_type = resource_type
        self.errors = list(errors)
        super(ResourceValidationError, self).__init__(
            "Invalid %s: %s" % (resource_type, "; ".join(self.errors)))


class ReplacementRequiredError(ProviderError):
    """Change to an attribute which can only be applied by recreating the resource
    """


class RemoteError(ProviderError):
    """Remote api call failed.

    The underlying api error is retained as both the exception cause and
    the `cause` attribute.
    """

    def __init__(self, message, cause=None, status=None):
        super(RemoteError, self).__init__(message)
        self.cause = cause
        self.status = status


class RemoteNotFoundError(RemoteError):
    """Remote api reported the resource does not exist
    """
