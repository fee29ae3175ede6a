class WorkflowSyncError(Exception):
    """Base exception for workflow publish and install errors."""
    pass

class MissingCredentialError(WorkflowSyncError):
    """Raised when publishing without a publish token. No request is sent."""
    pass

class MalformedWorkflowError(WorkflowSyncError):
    """Raised when a catalog entry's workflow payload cannot be parsed into a node forest."""
    pass

class ConfigurationError(WorkflowSyncError):
    """Raised when the SmartBlocks configuration page is missing from the graph."""
    pass

class NodeNotFoundError(WorkflowSyncError):
    """Raised by tree stores when an identifier does not resolve to a node."""
    pass
