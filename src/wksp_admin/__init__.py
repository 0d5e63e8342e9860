"""wksp-admin — Amazon WorkSpaces bundle/workspace administration CLI.

Built on boto3 with a strict layered architecture.
"""

from wksp_admin.version import __version__

__all__: list[str] = ["__version__"]
