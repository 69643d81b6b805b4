"""BaseService: foundation for all sixtydays services.

Every service receives a :class:`Workspace` at construction time. The
workspace owns settings plus the lazily created database engine and
PokeAPI client, so services never build their own infrastructure.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sixtydays.config.settings import SixtySettings
    from sixtydays.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CardService(BaseService):
            def get(self, card_id: int) -> ServiceResult:
                with self._workspace.transaction() as conn:
                    ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @property
    def settings(self) -> SixtySettings:
        return self._workspace.settings
