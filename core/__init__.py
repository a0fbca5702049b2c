"""
Core launcher and presenter backends for InfoBox.
"""

from .launcher import DialogLauncher  # noqa: F401
from .presenters import Presenter, choose_presenter  # noqa: F401
