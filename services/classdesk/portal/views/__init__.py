"""Export surface for portal.views.

Endpoints live in submodules by concern:
- portal.views.pages
- portal.views.classes
"""

from .classes import *  # noqa: F401,F403
from .pages import *  # noqa: F401,F403
