"""Template-related use cases."""

from .create_template import create_template
from .delete_template import delete_template
from .get_template import get_template
from .list_public_templates import list_public_templates
from .list_user_templates import list_user_templates
from .update_template import update_template

__all__ = [
    "create_template",
    "delete_template",
    "get_template",
    "list_public_templates",
    "list_user_templates",
    "update_template",
]
