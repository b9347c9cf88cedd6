"""
Minimal in-memory representation of the concept dictionary: concepts, their
names and their mappings to external terminologies.
"""

from uuid import uuid4

class MetadataObject:
    """Dictionary objects are identified by their uuid alone, the way they """
    """would be by the store they were pulled from."""
    def __init__(self, uuid=None):
        if uuid is None:
            uuid = str(uuid4())
        self.uuid = uuid

    def __eq__(self, other):
        if not isinstance(other, MetadataObject):
            return NotImplemented
        return type(self) is type(other) and self.uuid == other.uuid

    def __hash__(self):
        return hash((type(self).__name__, self.uuid))
