"""Error taxonomy for the notifier.

Aggregate validation keeps using protean's ``ValidationError``; these
exceptions cover the dispatch pipeline and the ticket filer.
"""


class NotifierError(Exception):
    """Base class for all notifier failures."""


class UnsupportedResourceType(NotifierError):
    """No trigger factory is registered for an event's resource type."""

    def __init__(self, resource_type, event_type=None):
        self.resource_type = resource_type
        self.event_type = event_type
        super().__init__(f"No trigger registered for resource type: {resource_type}")


class NotFound(NotifierError):
    """A referenced entity no longer exists."""


class EntityNotFound(NotFound):
    def __init__(self, resource_type, resource_id):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(f"{resource_type} '{resource_id}' not found")


class TaskNotFound(NotFound):
    def __init__(self, task_id):
        self.task_id = task_id
        super().__init__(f"task not found for id {task_id}")


class HostNotFound(NotFound):
    def __init__(self, task_id, host_id):
        self.task_id = task_id
        self.host_id = host_id
        super().__init__(f"host not found for task id {task_id} with host id: {host_id}")


class LookupFailed(NotifierError):
    """The backing store failed while looking something up."""


class InvalidSubscription(NotifierError):
    """A subscription is misconfigured (e.g. it has no selectors)."""

    def __init__(self, message, subscription_id=None):
        self.subscription_id = subscription_id
        super().__init__(message)


class TemplateError(NotifierError):
    """A template could not be rendered from the data it was given.

    Well-formed template data never triggers this; seeing it means a bug.
    """

    def __init__(self, template, message):
        self.template = template
        super().__init__(f"Failed to render template '{template}': {message}")


class UpstreamServiceError(NotifierError):
    """The ticket tracker or a delivery channel rejected a request."""

    def __init__(self, service, message):
        self.service = service
        super().__init__(f"{service}: {message}")
