"""Service layer — teardown resolution and dispatch.

INVARIANT: TeardownService.handle returns a TeardownResult for every event;
only collaborator exceptions escape it, and the plugin boundary absorbs them.
"""

from jobteardown.services.result import TeardownResult
from jobteardown.services.teardown import TeardownService

__all__ = ["TeardownResult", "TeardownService"]
