"""Labels and markers shared by the publish and install flows."""
import re

CONFIG_PAGE_TITLE = "roam/js/smartblocks"

# Children of the configuration page / publish index
PUBLISH_LABEL = "publish"
TOKEN_LABEL = "token"
UUID_LABEL = "uuid"

# Labeled groups read from nodes that reference a workflow root
DESCRIPTION_LABEL = "description"
IMAGE_LABEL = "image"
TAGS_LABEL = "tags"
METADATA_LABELS = (DESCRIPTION_LABEL, IMAGE_LABEL, TAGS_LABEL, UUID_LABEL)

WORKFLOW_MARKER = "#SmartBlock"
WORKFLOW_MARKER_REGEX = re.compile(r"#(?:\[\[)?(?:42)?SmartBlock(?:\]\])?")
HIDE_REGEX = re.compile(r"<%HIDE%>", re.IGNORECASE)

# Publish index child order for new nodes
PUBLISH_INDEX_ORDER = 3
PUBLISH_RECORD_ORDER = 1

def reference_token(uid: str) -> str:
    """Text of a node that references the node `uid`."""
    return f"(({uid}))"

def flex_pattern(key: str) -> "re.Pattern[str]":
    """
    Matches a label like 'publish' loosely: case-insensitive, surrounding
    whitespace ignored, an optional trailing '#.class' tag allowed.
    """
    return re.compile(rf"^\s*{re.escape(key)}\s*(#\.[\w-]*\s*)?$", re.IGNORECASE)

def workflow_name(root_text: str) -> str:
    """Catalog name for a workflow root: markers and hidden-content tags removed, trimmed."""
    name = WORKFLOW_MARKER_REGEX.sub("", root_text)
    name = HIDE_REGEX.sub("", name)
    return name.strip()
