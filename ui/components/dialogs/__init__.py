# -*- coding: utf-8 -*-
"""
Record forms for the NDIS lists.

Usage:
    from ui.components.dialogs import ParticipantDialog

    dialog = ParticipantDialog(parent=self)
    if dialog.exec_() == QDialog.Accepted:
        participant = dialog.participant()
"""

from .participant_dialog import ParticipantDialog
from .provider_dialog import ProviderDialog

__all__ = [
    "ParticipantDialog",
    "ProviderDialog",
]
