"""Helper functions for the modal dialogs of the game screen."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from flag_quiz.core.feedback import Feedback


def show_feedback(parent: QWidget, feedback: Feedback) -> None:
    """Show a modal feedback dialog and block until the player dismisses it.

    Args:
        parent: Parent widget for the dialog
        feedback: Title, message and button text to display
    """
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(feedback.title)
    msg_box.setText(feedback.title)
    msg_box.setInformativeText(feedback.message)
    msg_box.addButton(feedback.button_text, QMessageBox.AcceptRole)
    msg_box.exec()
