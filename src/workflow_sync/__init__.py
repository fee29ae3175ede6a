# src/workflow_sync/__init__.py

from .codec import decode, dumps_workflow, encode, loads_workflow
from .exceptions import (
    ConfigurationError,
    MalformedWorkflowError,
    MissingCredentialError,
    NodeNotFoundError,
    WorkflowSyncError,
)
from .installer import InstallCoordinator, InstallOutcome, InstallState
from .memory_store import InMemoryTreeStore
from .metadata import MetadataExtractor
from .publish_index import PublishIndex
from .publisher import PublishCoordinator, PublishOutcome, PublishState, success_notice
from .store import TreeStore
from .types import TransportNode, TreeNode, WorkflowMetadata

__all__ = [
    "TreeStore",
    "InMemoryTreeStore",
    "TreeNode",
    "TransportNode",
    "WorkflowMetadata",
    "encode",
    "decode",
    "dumps_workflow",
    "loads_workflow",
    "MetadataExtractor",
    "PublishIndex",
    "PublishCoordinator",
    "PublishOutcome",
    "PublishState",
    "success_notice",
    "InstallCoordinator",
    "InstallOutcome",
    "InstallState",
    "WorkflowSyncError",
    "MissingCredentialError",
    "MalformedWorkflowError",
    "ConfigurationError",
    "NodeNotFoundError",
]
